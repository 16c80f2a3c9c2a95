"""
MBTI assessment service.
"""

import logging

from questionnaire_api.domain.entities.mbti import MBTIAnswer, MBTIQuestion, UserMBTI
from questionnaire_api.domain.exceptions import EntityNotFoundError
from questionnaire_api.domain.repositories.mbti_repository import MBTIRepository
from questionnaire_api.domain.services.mbti_scoring import determine_type

logger = logging.getLogger(__name__)


class MBTIService:
    def __init__(self, mbti_repository: MBTIRepository):
        self._mbti = mbti_repository

    async def list_questions(self) -> list[MBTIQuestion]:
        return await self._mbti.list_questions()

    async def submit(self, user_id: int, answers: list[MBTIAnswer]) -> UserMBTI:
        """
        Score the answers, record the resulting type for the user and return it.

        Raises:
            EntityNotFoundError: If the computed type is missing from the type catalogue
        """
        questions = {q.question_id: q for q in await self._mbti.list_questions()}
        type_name = determine_type(questions, answers)

        mbti_type = await self._mbti.get_type(type_name)
        if mbti_type is None:
            raise EntityNotFoundError("MBTI type", type_name)

        assigned = await self._mbti.assign_type(user_id, mbti_type)
        logger.info(f"Assigned MBTI type {type_name} to user {user_id}")
        return assigned

    async def get_user_type(self, user_id: int) -> UserMBTI:
        result = await self._mbti.get_latest_for_user(user_id)
        if result is None:
            raise EntityNotFoundError("MBTI result for user", user_id)
        return result
