"""
SQLAlchemy implementation of the QuestionnaireRepository interface.
"""

from sqlalchemy import select

from questionnaire_api.domain.entities.questionnaire import (
    Question,
    Questionnaire,
    QuestionOption,
    QuestionType,
)
from questionnaire_api.domain.repositories.questionnaire_repository import (
    QuestionnaireRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.questionnaire import (
    QuestionModel,
    QuestionnaireModel,
    QuestionOptionModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


def _questionnaire_to_domain(model: QuestionnaireModel) -> Questionnaire:
    return Questionnaire(
        questionnaire_id=model.questionnaire_id,
        title=model.title,
        description=model.description,
        created_by=model.created_by,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _question_to_domain(model: QuestionModel) -> Question:
    return Question(
        question_id=model.question_id,
        questionnaire_id=model.questionnaire_id,
        question_text=model.question_text,
        question_type=QuestionType(model.question_type),
        options=[
            QuestionOption(
                option_id=o.option_id,
                question_id=o.question_id,
                option_text=o.option_text,
                is_correct=o.is_correct,
            )
            for o in model.options
        ],
    )


class SQLAlchemyQuestionnaireRepository(BaseSQLAlchemyRepository, QuestionnaireRepository):
    async def create(self, questionnaire: Questionnaire) -> Questionnaire:
        async with self._transaction() as session:
            model = QuestionnaireModel(
                title=questionnaire.title,
                description=questionnaire.description,
                created_by=questionnaire.created_by,
            )
            session.add(model)
            await session.flush()
            return _questionnaire_to_domain(model)

    async def get_by_id(self, questionnaire_id: int) -> Questionnaire | None:
        async with self._transaction() as session:
            model = await session.get(QuestionnaireModel, questionnaire_id)
            return _questionnaire_to_domain(model) if model else None

    async def list_questionnaires(self) -> list[Questionnaire]:
        async with self._transaction() as session:
            result = await session.execute(
                select(QuestionnaireModel).order_by(QuestionnaireModel.questionnaire_id)
            )
            return [_questionnaire_to_domain(m) for m in result.scalars().all()]

    async def add_question(self, question: Question) -> Question:
        async with self._transaction() as session:
            model = QuestionModel(
                questionnaire_id=question.questionnaire_id,
                question_text=question.question_text,
                question_type=question.question_type.value,
                options=[
                    QuestionOptionModel(option_text=o.option_text, is_correct=o.is_correct)
                    for o in question.options
                ],
            )
            session.add(model)
            await session.flush()
            return _question_to_domain(model)

    async def get_question(self, question_id: int) -> Question | None:
        async with self._transaction() as session:
            model = await session.get(QuestionModel, question_id)
            return _question_to_domain(model) if model else None

    async def list_questions(self, questionnaire_id: int) -> list[Question]:
        async with self._transaction() as session:
            result = await session.execute(
                select(QuestionModel)
                .where(QuestionModel.questionnaire_id == questionnaire_id)
                .order_by(QuestionModel.question_id)
            )
            return [_question_to_domain(m) for m in result.scalars().all()]
