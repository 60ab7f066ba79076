"""JSON reporter - machine-readable results file."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Union

from ..models.results import FileResult
from ..sources.loader import Source
from .base import BaseReporter

DEFAULT_RESULTS_FILE = "results.json"


class JsonReporter(BaseReporter):
    """Writes results as JSON.

    The file holds a list of ``{"file": ..., "results": [...]}`` objects
    and is replaced on every run.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_RESULTS_FILE, only_suggestions: bool = True):
        super().__init__(only_suggestions=only_suggestions)
        self.path = Path(path)

    def to_data(self, file_results: Sequence[FileResult]) -> list[dict[str, Any]]:
        return [f.to_dict() for f in self.select(file_results)]

    def dumps(self, file_results: Sequence[FileResult]) -> str:
        return json.dumps(self.to_data(file_results), ensure_ascii=False)

    def report(
        self,
        file_results: Sequence[FileResult],
        failed: Sequence[Source] = (),
    ) -> None:
        for source in failed:
            self.logger.error(f"Failed to load {source.path}: {source.error}")

        self.path.write_text(self.dumps(file_results), encoding="utf-8")
        self.logger.info(f"Saved results for {len(file_results)} documents to {self.path}")
