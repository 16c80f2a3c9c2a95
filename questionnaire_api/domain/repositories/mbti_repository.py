"""
MBTI Repository domain interface.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.mbti import MBTIQuestion, MBTIType, UserMBTI


class MBTIRepository(ABC):
    """Repository interface for MBTI questions, types and user assignments."""

    @abstractmethod
    async def list_questions(self) -> list[MBTIQuestion]:
        pass

    @abstractmethod
    async def get_type(self, type_name: str) -> MBTIType | None:
        pass

    @abstractmethod
    async def assign_type(self, user_id: int, mbti_type: MBTIType) -> UserMBTI:
        pass

    @abstractmethod
    async def get_latest_for_user(self, user_id: int) -> UserMBTI | None:
        """Return the most recently assigned type for the user, or None."""
        pass
