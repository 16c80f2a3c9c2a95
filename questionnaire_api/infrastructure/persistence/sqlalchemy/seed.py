"""
Bootstrap data.

Seeds the default roles, the endpoint catalogue with its privilege matrix, the
MBTI types and starter questions, and an optional bootstrap admin. Each group
is only written into an empty table, so restarting the service never
duplicates or overwrites administrative changes.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from questionnaire_api.core.config.settings import Settings
from questionnaire_api.infrastructure.persistence.sqlalchemy.models import (
    EndpointModel,
    MBTIQuestionModel,
    MBTITypeModel,
    RoleModel,
    RolePrivilegeModel,
    UserModel,
)
from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler

logger = logging.getLogger(__name__)

ADMIN = "admin"
MANAGER = "questionnaire manager"
MEMBER = "member"

DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    (ADMIN, "Full access, including user management"),
    (MANAGER, "Manage questionnaires and generate reports"),
    (MEMBER, "Submit answers and view own data"),
)

FULL = "crud"
READ = "r"
CREATE = "c"


@dataclass(frozen=True)
class EndpointSeed:
    path: str
    method: str
    description: str
    grants: dict[str, str]


# Paths are relative to the API prefix. Admin has full access to every entry.
ENDPOINT_CATALOGUE: tuple[EndpointSeed, ...] = (
    EndpointSeed("/auth/register", "POST", "User registration endpoint", {}),
    EndpointSeed("/auth/login", "POST", "User login endpoint", {}),
    EndpointSeed("/roles", "POST", "Create a new role", {}),
    EndpointSeed("/roles", "GET", "Fetch all roles", {MANAGER: READ}),
    EndpointSeed("/endpoints", "POST", "Create a new endpoint", {}),
    EndpointSeed("/endpoints", "GET", "Fetch all endpoints", {}),
    EndpointSeed("/role_privileges", "POST", "Assign or update role privileges for endpoints", {}),
    EndpointSeed("/questionnaire", "GET", "Get questionnaires", {MANAGER: FULL}),
    EndpointSeed("/questionnaire", "POST", "Create questionnaire", {MANAGER: FULL}),
    EndpointSeed("/questions", "POST", "Create a new question", {MANAGER: FULL}),
    EndpointSeed(
        "/questions/:questionnaire_id", "GET", "Fetch questions by questionnaire", {MANAGER: FULL}
    ),
    EndpointSeed("/answers", "POST", "Submit answers", {MANAGER: FULL, MEMBER: CREATE}),
    EndpointSeed("/dss/submit", "POST", "Submit answers for analysis", {MANAGER: FULL}),
    EndpointSeed("/mbti/questions", "GET", "Get the MBTI questionnaire", {MANAGER: READ}),
    EndpointSeed("/mbti/submit", "POST", "Submit answers for MBTI analysis", {MEMBER: CREATE}),
    EndpointSeed("/mbti/user-type", "GET", "Get the user type", {MEMBER: READ}),
    EndpointSeed("/auth/role", "GET", "Get the caller's role", {MANAGER: READ, MEMBER: READ}),
    EndpointSeed("/role_privileges/:role_id", "GET", "Fetch privileges of a role", {}),
)

MBTI_TYPES: tuple[tuple[str, str], ...] = (
    ("ISTJ", "The Inspector: Responsible, serious, traditional, and organized."),
    ("ISFJ", "The Protector: Warm, caring, meticulous, and dependable."),
    ("INFJ", "The Advocate: Visionary, empathetic, inspiring, and creative."),
    ("INTJ", "The Architect: Strategic, logical, independent, and determined."),
    ("ISTP", "The Virtuoso: Practical, spontaneous, analytical, and resourceful."),
    ("ISFP", "The Adventurer: Artistic, adaptable, sensitive, and easygoing."),
    ("INFP", "The Mediator: Idealistic, empathetic, introspective, and kind."),
    ("INTP", "The Thinker: Curious, analytical, intellectual, and innovative."),
    ("ESTP", "The Entrepreneur: Energetic, outgoing, adventurous, and bold."),
    ("ESFP", "The Entertainer: Fun-loving, enthusiastic, spontaneous, and lively."),
    ("ENFP", "The Campaigner: Creative, optimistic, enthusiastic, and friendly."),
    ("ENTP", "The Debater: Charismatic, curious, energetic, and strategic."),
    ("ESTJ", "The Executive: Organized, traditional, practical, and direct."),
    ("ESFJ", "The Consul: Caring, social, reliable, and loyal."),
    ("ENFJ", "The Protagonist: Inspiring, empathetic, charismatic, and altruistic."),
    ("ENTJ", "The Commander: Visionary, assertive, strategic, and confident."),
)

MBTI_QUESTIONS: tuple[tuple[str, str, str], ...] = (
    ("You enjoy vibrant social events with lots of people.", "EI", "negative"),
    ("You often spend time exploring unrealistic and impractical ideas.", "SN", "positive"),
)


def _grant_columns(grants: str) -> dict[str, bool]:
    return {
        "can_create": "c" in grants,
        "can_read": "r" in grants,
        "can_update": "u" in grants,
        "can_delete": "d" in grants,
    }


async def _is_empty(session: AsyncSession, model: type) -> bool:
    count = await session.scalar(select(func.count()).select_from(model))
    return not count


async def _seed_rbac(session: AsyncSession, api_prefix: str) -> None:
    if not await _is_empty(session, RoleModel):
        logger.debug("Roles already present, skipping RBAC seed")
        return

    roles = {name: RoleModel(role_name=name, description=desc) for name, desc in DEFAULT_ROLES}
    session.add_all(roles.values())
    await session.flush()

    if not await _is_empty(session, EndpointModel):
        logger.info("Seeded default roles; endpoint catalogue already present")
        return

    for seed in ENDPOINT_CATALOGUE:
        endpoint = EndpointModel(
            url=f"{api_prefix}{seed.path}", method=seed.method, description=seed.description
        )
        session.add(endpoint)
        await session.flush()

        grants = {ADMIN: FULL, **seed.grants}
        for role_name, role_grants in grants.items():
            session.add(
                RolePrivilegeModel(
                    role_id=roles[role_name].role_id,
                    endpoint_id=endpoint.endpoint_id,
                    **_grant_columns(role_grants),
                )
            )

    logger.info(
        f"Seeded {len(DEFAULT_ROLES)} roles and {len(ENDPOINT_CATALOGUE)} endpoints"
    )


async def _seed_mbti(session: AsyncSession) -> None:
    if await _is_empty(session, MBTITypeModel):
        session.add_all(
            MBTITypeModel(type_name=name, description=desc) for name, desc in MBTI_TYPES
        )
        logger.info(f"Seeded {len(MBTI_TYPES)} MBTI types")

    if await _is_empty(session, MBTIQuestionModel):
        session.add_all(
            MBTIQuestionModel(question_text=text, dimension=dimension, direction=direction)
            for text, dimension, direction in MBTI_QUESTIONS
        )
        logger.info(f"Seeded {len(MBTI_QUESTIONS)} MBTI questions")


async def _seed_admin(session: AsyncSession, settings: Settings) -> None:
    if not settings.BOOTSTRAP_ADMIN_USERNAME or settings.BOOTSTRAP_ADMIN_PASSWORD is None:
        return

    existing = await session.scalar(
        select(UserModel).where(UserModel.username == settings.BOOTSTRAP_ADMIN_USERNAME)
    )
    if existing is not None:
        return

    admin_role = await session.scalar(select(RoleModel).where(RoleModel.role_name == ADMIN))
    password_handler = PasswordHandler(schemes=settings.PASSWORD_HASHING_SCHEMES)
    session.add(
        UserModel(
            username=settings.BOOTSTRAP_ADMIN_USERNAME,
            email=settings.BOOTSTRAP_ADMIN_EMAIL,
            password_hash=password_handler.get_password_hash(
                settings.BOOTSTRAP_ADMIN_PASSWORD.get_secret_value()
            ),
            role_id=admin_role.role_id if admin_role else None,
        )
    )
    logger.info(f"Created bootstrap admin user {settings.BOOTSTRAP_ADMIN_USERNAME!r}")


async def seed_defaults(
    session_factory: async_sessionmaker[AsyncSession], settings: Settings
) -> None:
    """Seed bootstrap data into empty tables in a single transaction."""
    async with session_factory() as session:
        async with session.begin():
            await _seed_rbac(session, settings.API_V1_STR)
            await _seed_mbti(session)
            await _seed_admin(session, settings)
