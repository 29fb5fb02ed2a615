"""
PhishGuard – History Store
Keeps the most recent analysis results, newest first, in a JSON file under
a fixed storage key.
"""

import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from pydantic import TypeAdapter, ValidationError
from config import HISTORY_LIMIT, HISTORY_STORAGE_KEY
from models import AnalysisResult

logger = logging.getLogger(__name__)

_results_adapter = TypeAdapter(list[AnalysisResult])


class HistoryStore:
    def __init__(self, path: Union[str, Path], limit: int = HISTORY_LIMIT):
        self.path = Path(path)
        self.limit = limit
        self._lock = threading.Lock()
        self._results = self._read()

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read history file %s: %s", self.path, e)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring history file %s: not a JSON object", self.path)
            return {}
        return document

    def _read(self) -> list[AnalysisResult]:
        entries = self._read_document().get(HISTORY_STORAGE_KEY, [])
        try:
            results = _results_adapter.validate_python(entries)
        except ValidationError as e:
            logger.warning("Failed to load saved analyses from %s: %s", self.path, e)
            return []
        return results[: self.limit]

    def _replace_file(self, document: dict) -> None:
        # swapped in whole with os.replace, never truncated in place
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def _write(self, results: list[AnalysisResult]) -> None:
        document = self._read_document()
        document[HISTORY_STORAGE_KEY] = _results_adapter.dump_python(
            results, mode="json", by_alias=True
        )
        self._replace_file(document)

    def load(self) -> list[AnalysisResult]:
        with self._lock:
            return list(self._results)

    def add(self, result: AnalysisResult) -> list[AnalysisResult]:
        with self._lock:
            results = [result, *self._results][: self.limit]
            self._write(results)
            self._results = results
            return list(self._results)

    def clear(self) -> int:
        """Empty the history and drop its persisted entry. Returns how many results were removed."""
        with self._lock:
            removed = len(self._results)
            document = self._read_document()
            document.pop(HISTORY_STORAGE_KEY, None)
            if document:
                self._replace_file(document)
            elif self.path.exists():
                self.path.unlink()
            self._results = []
            return removed

    def export_json(self) -> str:
        with self._lock:
            data = _results_adapter.dump_python(self._results, mode="json", by_alias=True)
        return json.dumps(data, indent=2, ensure_ascii=False)

    @staticmethod
    def export_filename(now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        return f"phishing_analysis_{now.date().isoformat()}.json"
