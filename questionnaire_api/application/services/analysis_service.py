"""
Analysis service.

Tallies the options chosen for a questionnaire and stores the result.
"""

import logging

from questionnaire_api.domain.entities.analysis import AnalysisResult
from questionnaire_api.domain.exceptions import EntityNotFoundError
from questionnaire_api.domain.repositories.analysis_repository import AnalysisRepository
from questionnaire_api.domain.repositories.questionnaire_repository import (
    QuestionnaireRepository,
)

logger = logging.getLogger(__name__)


class AnalysisService:
    def __init__(
        self,
        questionnaire_repository: QuestionnaireRepository,
        analysis_repository: AnalysisRepository,
    ):
        self._questionnaires = questionnaire_repository
        self._analysis = analysis_repository

    async def submit_analysis(self, questionnaire_id: int) -> AnalysisResult:
        if await self._questionnaires.get_by_id(questionnaire_id) is None:
            raise EntityNotFoundError("Questionnaire", questionnaire_id)

        tallies = await self._analysis.tally_options(questionnaire_id)
        result = await self._analysis.save_result(questionnaire_id, tallies)
        logger.info(
            f"Stored analysis {result.analysis_id} for questionnaire {questionnaire_id} "
            f"({len(tallies)} options)"
        )
        return result
