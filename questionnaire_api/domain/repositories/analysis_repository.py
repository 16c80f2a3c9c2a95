"""
Analysis Repository domain interface.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.analysis import AnalysisResult, OptionTally


class AnalysisRepository(ABC):
    """Repository interface for option tallies and stored analysis results."""

    @abstractmethod
    async def tally_options(self, questionnaire_id: int) -> list[OptionTally]:
        """
        Count how often each option of the questionnaire's questions was chosen.

        Returns:
            Tallies ordered by count, most frequent first
        """
        pass

    @abstractmethod
    async def save_result(
        self, questionnaire_id: int, tallies: list[OptionTally]
    ) -> AnalysisResult:
        pass
