"""
SQLAlchemy implementation of the ResponseRepository interface.
"""

import logging

from sqlalchemy import select

from questionnaire_api.domain.entities.questionnaire import Answer, QuestionnaireResponse
from questionnaire_api.domain.exceptions import DuplicateEntityError
from questionnaire_api.domain.repositories.response_repository import ResponseRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.questionnaire import (
    AnswerModel,
    QuestionnaireResponseModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


def _response_to_domain(model: QuestionnaireResponseModel) -> QuestionnaireResponse:
    return QuestionnaireResponse(
        response_id=model.response_id,
        questionnaire_id=model.questionnaire_id,
        user_id=model.user_id,
        submitted_at=model.submitted_at,
    )


class SQLAlchemyResponseRepository(BaseSQLAlchemyRepository, ResponseRepository):
    async def _find_response(
        self, questionnaire_id: int, user_id: int
    ) -> QuestionnaireResponse | None:
        async with self._transaction() as session:
            result = await session.execute(
                select(QuestionnaireResponseModel).where(
                    QuestionnaireResponseModel.questionnaire_id == questionnaire_id,
                    QuestionnaireResponseModel.user_id == user_id,
                )
            )
            model = result.scalar_one_or_none()
            return _response_to_domain(model) if model else None

    async def get_or_create_response(
        self, questionnaire_id: int, user_id: int
    ) -> QuestionnaireResponse:
        existing = await self._find_response(questionnaire_id, user_id)
        if existing is not None:
            return existing

        try:
            async with self._transaction() as session:
                model = QuestionnaireResponseModel(
                    questionnaire_id=questionnaire_id, user_id=user_id
                )
                session.add(model)
                await session.flush()
                return _response_to_domain(model)
        except DuplicateEntityError:
            # Created concurrently by another request for the same user
            logger.debug(
                f"Response for questionnaire {questionnaire_id} and user {user_id} "
                "created concurrently, re-reading"
            )
            existing = await self._find_response(questionnaire_id, user_id)
            if existing is None:
                raise
            return existing

    async def add_answer(self, answer: Answer) -> Answer:
        async with self._transaction() as session:
            model = AnswerModel(
                response_id=answer.response_id,
                question_id=answer.question_id,
                answer_text=answer.answer_text,
                answer_option=answer.answer_option,
            )
            session.add(model)
            await session.flush()
            return answer.model_copy(update={"answer_id": model.answer_id})
