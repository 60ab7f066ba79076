"""Base reporter interface."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.results import FileResult
from ..sources.loader import Source


class BaseReporter(ABC):
    """Base class for result reporters.

    Reporters present proofreading results; they never change them.
    """

    def __init__(self, only_suggestions: bool = True):
        """Initialize reporter.

        Args:
            only_suggestions: Leave clean units out of the report
        """
        self.only_suggestions = only_suggestions
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def select(self, file_results: Sequence[FileResult]) -> list[FileResult]:
        """Apply the clean-unit filter."""
        if not self.only_suggestions:
            return list(file_results)
        return [f.with_suggestions() for f in file_results]

    @abstractmethod
    def report(
        self,
        file_results: Sequence[FileResult],
        failed: Sequence[Source] = (),
    ) -> None:
        """Present results.

        Args:
            file_results: Proofreading results per document
            failed: Sources that could not be loaded
        """
        pass
