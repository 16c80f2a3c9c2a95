"""
Questionnaire service.

Creation and retrieval of questionnaires and their questions.
"""

import logging

from questionnaire_api.domain.entities.questionnaire import (
    Question,
    Questionnaire,
    QuestionOption,
    QuestionType,
)
from questionnaire_api.domain.exceptions import EntityNotFoundError
from questionnaire_api.domain.repositories.questionnaire_repository import (
    QuestionnaireRepository,
)

logger = logging.getLogger(__name__)


class QuestionnaireService:
    def __init__(self, questionnaire_repository: QuestionnaireRepository):
        self._questionnaires = questionnaire_repository

    async def create_questionnaire(
        self, title: str, description: str | None, created_by: int | None
    ) -> Questionnaire:
        questionnaire = await self._questionnaires.create(
            Questionnaire(title=title, description=description, created_by=created_by)
        )
        logger.info(f"Created questionnaire {questionnaire.questionnaire_id}")
        return questionnaire

    async def list_questionnaires(self) -> list[Questionnaire]:
        return await self._questionnaires.list_questionnaires()

    async def get_questionnaire(self, questionnaire_id: int) -> Questionnaire:
        questionnaire = await self._questionnaires.get_by_id(questionnaire_id)
        if questionnaire is None:
            raise EntityNotFoundError("Questionnaire", questionnaire_id)
        return questionnaire

    async def add_question(
        self,
        questionnaire_id: int,
        question_text: str,
        question_type: QuestionType,
        options: list[QuestionOption],
    ) -> Question:
        """
        Add a question to a questionnaire.

        Options are only kept for multiple-choice questions.

        Raises:
            EntityNotFoundError: If the questionnaire does not exist
        """
        await self.get_questionnaire(questionnaire_id)
        question = Question(
            questionnaire_id=questionnaire_id,
            question_text=question_text,
            question_type=question_type,
            options=options if question_type is QuestionType.MULTIPLE_CHOICE else [],
        )
        return await self._questionnaires.add_question(question)

    async def list_questions(self, questionnaire_id: int) -> list[Question]:
        await self.get_questionnaire(questionnaire_id)
        return await self._questionnaires.list_questions(questionnaire_id)
