"""
Response Repository domain interface.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.questionnaire import Answer, QuestionnaireResponse


class ResponseRepository(ABC):
    """Repository interface for questionnaire responses and their answers."""

    @abstractmethod
    async def get_or_create_response(
        self, questionnaire_id: int, user_id: int
    ) -> QuestionnaireResponse:
        """
        Return the user's response record for a questionnaire, creating it if needed.

        There is at most one response record per (questionnaire, user).
        """
        pass

    @abstractmethod
    async def add_answer(self, answer: Answer) -> Answer:
        pass
