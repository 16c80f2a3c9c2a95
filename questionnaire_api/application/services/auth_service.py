"""
Authentication service.

Registration, credential checks and token issuance.
"""

import logging
from dataclasses import dataclass

from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.entities.user import User
from questionnaire_api.domain.exceptions import EntityNotFoundError, InvalidCredentialsError
from questionnaire_api.domain.repositories.role_repository import RoleRepository
from questionnaire_api.domain.repositories.user_repository import UserRepository
from questionnaire_api.infrastructure.security.jwt.jwt_service import JWTService
from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    access_token: str
    role_name: str | None
    token_type: str = "bearer"


class AuthService:
    """Registers users and exchanges credentials for access tokens."""

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        password_handler: PasswordHandler,
        jwt_service: JWTService,
        default_role_name: str | None = None,
    ):
        self._users = user_repository
        self._roles = role_repository
        self._passwords = password_handler
        self._jwt = jwt_service
        self._default_role_name = default_role_name

    async def register(self, username: str, email: str, password: str) -> User:
        """
        Create a user with the default role, if that role exists.

        Raises:
            DuplicateEntityError: If the username or email is taken
        """
        role_id = None
        if self._default_role_name:
            role = await self._roles.get_by_name(self._default_role_name)
            if role is None:
                logger.warning(
                    f"Default role {self._default_role_name!r} not found; user gets no role"
                )
            else:
                role_id = role.role_id

        user = User(
            username=username,
            email=email,
            password_hash=self._passwords.get_password_hash(password),
            role_id=role_id,
        )
        return await self._users.create(user)

    async def login(self, username: str, password: str) -> LoginResult:
        """
        Verify credentials and issue an access token.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self._users.get_by_username(username)
        if user is None or not self._passwords.verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError("Invalid username or password")

        token = await self._jwt.create_access_token(
            user_id=user.user_id, role_id=user.role_id, username=user.username
        )
        role_name = await self._role_name(user.role_id)
        logger.info(f"User {user.user_id} logged in")
        return LoginResult(access_token=token, role_name=role_name)

    async def get_role_name(self, identity: IdentityContext) -> str:
        """
        Return the name of the caller's role.

        Raises:
            EntityNotFoundError: If the caller has no role or it no longer exists
        """
        role_name = await self._role_name(identity.role_id)
        if role_name is None:
            raise EntityNotFoundError("Role", identity.role_id)
        return role_name

    async def _role_name(self, role_id: int | None) -> str | None:
        if role_id is None:
            return None
        role = await self._roles.get_by_id(role_id)
        return role.role_name if role else None
