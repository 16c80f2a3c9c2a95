"""
Unit tests for the application services using in-memory and mocked repositories.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from questionnaire_api.application.services import (
    AccessControlService,
    AnswerService,
    AuthService,
    MBTIService,
    QuestionnaireService,
)
from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.entities.mbti import (
    Dimension,
    Direction,
    MBTIAnswer,
    MBTIQuestion,
    MBTIType,
    UserMBTI,
)
from questionnaire_api.domain.entities.questionnaire import (
    Question,
    Questionnaire,
    QuestionOption,
    QuestionType,
)
from questionnaire_api.domain.entities.rbac import Privilege
from questionnaire_api.domain.entities.user import User
from questionnaire_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidCredentialsError,
    MalformedTemplateError,
    ValidationError,
)
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry


@pytest.fixture
def access_control(role_repository, endpoint_repository, privilege_repository):
    registry = MagicMock(spec=EndpointRegistry)
    service = AccessControlService(
        role_repository, endpoint_repository, privilege_repository, registry
    )
    return service, registry


class TestAccessControlService:
    @pytest.mark.asyncio
    async def test_register_endpoint_invalidates_registry(self, access_control):
        service, registry = access_control

        endpoint = await service.register_endpoint("/answers", "post", "Submit answers")

        assert endpoint.method == "POST"
        registry.invalidate.assert_called_once()

    @pytest.mark.asyncio
    async def test_register_endpoint_rejects_unknown_method(self, access_control):
        service, registry = access_control

        with pytest.raises(ValidationError):
            await service.register_endpoint("/answers", "OPTIONS")
        registry.invalidate.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_endpoint_rejects_malformed_template(self, access_control):
        service, registry = access_control

        with pytest.raises(MalformedTemplateError):
            await service.register_endpoint("/answers/{id", "GET")
        registry.invalidate.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url", ["/questions/{questionnaire_id}", "/questions/:qid", "/questions/{item}"]
    )
    async def test_register_endpoint_rejects_equivalent_template(
        self, access_control, endpoint_repository, url
    ):
        service, registry = access_control

        with pytest.raises(DuplicateEntityError):
            await service.register_endpoint(url, "GET")
        registry.invalidate.assert_not_called()
        assert len(await endpoint_repository.list_endpoints()) == 4

    @pytest.mark.asyncio
    async def test_equivalent_template_with_other_method_is_allowed(self, access_control):
        service, registry = access_control

        endpoint = await service.register_endpoint("/questions/{questionnaire_id}", "PUT")

        assert endpoint.url == "/questions/{questionnaire_id}"
        registry.invalidate.assert_called_once()

    @pytest.mark.asyncio
    async def test_set_privileges_requires_known_role_and_endpoint(self, access_control):
        service, _ = access_control

        with pytest.raises(EntityNotFoundError):
            await service.set_privileges(Privilege(role_id=99, endpoint_id=1))
        with pytest.raises(EntityNotFoundError):
            await service.set_privileges(Privilege(role_id=1, endpoint_id=99))

    @pytest.mark.asyncio
    async def test_set_privileges_overwrites(self, access_control, privilege_repository):
        service, _ = access_control

        await service.set_privileges(Privilege(role_id=2, endpoint_id=2, can_update=True))

        row = await privilege_repository.get_privilege(2, 2)
        assert row.can_update and not row.can_read


class TestAuthService:
    @pytest.fixture
    def password_handler(self):
        handler = MagicMock()
        handler.get_password_hash.side_effect = lambda p: f"hashed:{p}"
        handler.verify_password.side_effect = lambda p, h: h == f"hashed:{p}"
        return handler

    @pytest.fixture
    def user_repository(self):
        repository = AsyncMock()
        repository.create.side_effect = lambda user: user.model_copy(update={"user_id": 11})
        return repository

    @pytest.fixture
    def auth_service(self, user_repository, role_repository, password_handler, jwt_service):
        return AuthService(
            user_repository, role_repository, password_handler, jwt_service, "member"
        )

    @pytest.mark.asyncio
    async def test_register_assigns_default_role(self, auth_service, user_repository):
        user = await auth_service.register("zoe", "zoe@example.com", "zoe-password")

        assert user.role_id == 2
        assert user.password_hash == "hashed:zoe-password"

    @pytest.mark.asyncio
    async def test_login_issues_token_with_role(self, auth_service, user_repository, jwt_service):
        user_repository.get_by_username.return_value = User(
            user_id=11, username="zoe", email="zoe@example.com",
            password_hash="hashed:zoe-password", role_id=2,
        )

        result = await auth_service.login("zoe", "zoe-password")

        assert result.role_name == "member"
        assert jwt_service.get_identity(result.access_token) == IdentityContext(
            user_id=11, role_id=2, username="zoe"
        )

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, auth_service, user_repository):
        user_repository.get_by_username.return_value = User(
            user_id=11, username="zoe", email="zoe@example.com",
            password_hash="hashed:zoe-password", role_id=2,
        )

        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("zoe", "nope")

    @pytest.mark.asyncio
    async def test_role_name_for_roleless_identity(self, auth_service):
        with pytest.raises(EntityNotFoundError):
            await auth_service.get_role_name(IdentityContext(user_id=1, role_id=None))


class TestQuestionnaireAndAnswerServices:
    @pytest.fixture
    def questionnaire_repository(self):
        repository = AsyncMock()
        repository.get_by_id.side_effect = lambda qid: (
            Questionnaire(questionnaire_id=qid, title="Q") if qid in (1, 2) else None
        )
        repository.get_question.side_effect = lambda question_id: {
            10: Question(
                question_id=10,
                questionnaire_id=1,
                question_text="Pick",
                question_type=QuestionType.MULTIPLE_CHOICE,
                options=[QuestionOption(option_id=100, question_id=10, option_text="A")],
            ),
        }.get(question_id)
        repository.add_question.side_effect = lambda question: question
        return repository

    @pytest.mark.asyncio
    async def test_text_questions_drop_options(self, questionnaire_repository):
        service = QuestionnaireService(questionnaire_repository)

        question = await service.add_question(
            1, "Why?", QuestionType.TEXT, [QuestionOption(option_text="ignored")]
        )

        assert question.options == []

    @pytest.mark.asyncio
    async def test_unknown_questionnaire(self, questionnaire_repository):
        service = QuestionnaireService(questionnaire_repository)

        with pytest.raises(EntityNotFoundError):
            await service.list_questions(3)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("questionnaire_id", "question_id", "text", "option", "error"),
        [
            (1, 10, None, None, ValidationError),
            (1, 10, "x", 100, ValidationError),
            (3, 10, "x", None, EntityNotFoundError),
            (1, 11, "x", None, EntityNotFoundError),
            (2, 10, "x", None, ValidationError),
            (1, 10, None, 999, ValidationError),
        ],
    )
    async def test_answer_validation(
        self, questionnaire_repository, questionnaire_id, question_id, text, option, error
    ):
        responses = AsyncMock()
        service = AnswerService(questionnaire_repository, responses)

        with pytest.raises(error):
            await service.submit_answer(5, questionnaire_id, question_id, text, option)
        responses.add_answer.assert_not_awaited()


class TestMBTIService:
    @pytest.mark.asyncio
    async def test_submit_records_computed_type(self):
        repository = AsyncMock()
        repository.list_questions.return_value = [
            MBTIQuestion(
                question_id=1,
                question_text="q",
                dimension=Dimension.EI,
                direction=Direction.NEGATIVE,
            )
        ]
        repository.get_type.return_value = MBTIType(type_id=1, type_name="ISTJ", description="d")
        repository.assign_type.return_value = UserMBTI(user_id=5, type_name="ISTJ", description="d")
        service = MBTIService(repository)

        result = await service.submit(5, [MBTIAnswer(question_id=1, response=2)])

        repository.get_type.assert_awaited_once_with("ISTJ")
        assert result.type_name == "ISTJ"

    @pytest.mark.asyncio
    async def test_user_without_result(self):
        repository = AsyncMock()
        repository.get_latest_for_user.return_value = None

        with pytest.raises(EntityNotFoundError):
            await MBTIService(repository).get_user_type(5)
