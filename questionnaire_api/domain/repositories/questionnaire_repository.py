"""
Questionnaire Repository domain interface.

Covers questionnaires and their questions and options.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.questionnaire import Question, Questionnaire


class QuestionnaireRepository(ABC):
    """Repository interface for questionnaires, questions and options."""

    @abstractmethod
    async def create(self, questionnaire: Questionnaire) -> Questionnaire:
        pass

    @abstractmethod
    async def get_by_id(self, questionnaire_id: int) -> Questionnaire | None:
        pass

    @abstractmethod
    async def list_questionnaires(self) -> list[Questionnaire]:
        pass

    @abstractmethod
    async def add_question(self, question: Question) -> Question:
        """
        Store a question together with its options.

        Returns:
            The stored Question with ids assigned to it and its options
        """
        pass

    @abstractmethod
    async def get_question(self, question_id: int) -> Question | None:
        pass

    @abstractmethod
    async def list_questions(self, questionnaire_id: int) -> list[Question]:
        pass
