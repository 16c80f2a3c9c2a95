"""
Authentication endpoints.

Registration and login are public; the role lookup is RBAC-gated like every
other route.
"""

from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import AuthServiceDep, IdentityDep
from questionnaire_api.presentation.api.schemas.auth import (
    LoginRequestSchema,
    RegisterRequestSchema,
    RoleNameResponseSchema,
    TokenResponseSchema,
    UserResponseSchema,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=UserResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(payload: RegisterRequestSchema, auth_service: AuthServiceDep):
    user = await auth_service.register(payload.username, str(payload.email), payload.password)
    return UserResponseSchema.model_validate(user)


@router.post(
    "/login",
    response_model=TokenResponseSchema,
    summary="Authenticate user and get an access token",
)
async def login(payload: LoginRequestSchema, auth_service: AuthServiceDep):
    result = await auth_service.login(payload.username, payload.password)
    return TokenResponseSchema(
        access_token=result.access_token,
        token_type=result.token_type,
        role_name=result.role_name,
    )


@router.get("/role", response_model=RoleNameResponseSchema, summary="Get the caller's role")
async def get_role(identity: IdentityDep, auth_service: AuthServiceDep):
    return RoleNameResponseSchema(role_name=await auth_service.get_role_name(identity))
