"""
SQLAlchemy implementation of the AnalysisRepository interface.
"""

from sqlalchemy import func, select

from questionnaire_api.domain.entities.analysis import AnalysisResult, OptionTally
from questionnaire_api.domain.repositories.analysis_repository import AnalysisRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.analysis import (
    DSSAnalysisModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.questionnaire import (
    AnswerModel,
    QuestionModel,
    QuestionOptionModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


class SQLAlchemyAnalysisRepository(BaseSQLAlchemyRepository, AnalysisRepository):
    async def tally_options(self, questionnaire_id: int) -> list[OptionTally]:
        answer_count = func.count(AnswerModel.answer_id)
        query = (
            select(
                QuestionOptionModel.option_id,
                QuestionOptionModel.option_text,
                answer_count.label("answer_count"),
            )
            .join(AnswerModel, AnswerModel.answer_option == QuestionOptionModel.option_id)
            .join(QuestionModel, QuestionModel.question_id == QuestionOptionModel.question_id)
            .where(QuestionModel.questionnaire_id == questionnaire_id)
            .group_by(QuestionOptionModel.option_id, QuestionOptionModel.option_text)
            .order_by(answer_count.desc(), QuestionOptionModel.option_id)
        )
        async with self._transaction() as session:
            result = await session.execute(query)
            return [
                OptionTally(
                    option_id=row.option_id,
                    option_text=row.option_text,
                    count=row.answer_count,
                )
                for row in result.all()
            ]

    async def save_result(
        self, questionnaire_id: int, tallies: list[OptionTally]
    ) -> AnalysisResult:
        async with self._transaction() as session:
            model = DSSAnalysisModel(
                questionnaire_id=questionnaire_id,
                analysis_result=[t.model_dump() for t in tallies],
            )
            session.add(model)
            await session.flush()
            return AnalysisResult(
                analysis_id=model.analysis_id,
                questionnaire_id=model.questionnaire_id,
                analysis_result=tallies,
                analyzed_at=model.analyzed_at,
            )
