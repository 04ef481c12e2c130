"""Thread-safety tests for MessageSource.

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from i18nsource.source import MemoryMessageLoader, MessageSource

TABLES = {
    "messages/de/app": {"Save": "Speichern", "Open": "Öffnen"},
    "messages/de-AT/app": {"Save": "Sichern"},
    "messages/fr/app": {"Save": "Enregistrer"},
}


class SlowLoader(MemoryMessageLoader):
    """Loader that blocks until every worker has started loading."""

    def __init__(self, barrier: threading.Barrier) -> None:
        super().__init__(TABLES)
        self.barrier = barrier

    def load(self, path: str) -> dict[str, str] | None:
        if path == "messages/fr/app":
            self.barrier.wait(timeout=5)
        return super().load(path)


class TestConcurrentLookups:
    """Concurrent callers see consistent results."""

    def test_parallel_lookups_return_correct_values(self) -> None:
        """Mixed languages and keys from many threads."""
        source = MessageSource(MemoryMessageLoader(TABLES))
        requests = [
            ("Save", "de", "Speichern"),
            ("Open", "de-AT", "Öffnen"),
            ("Save", "de-AT", "Sichern"),
            ("Missing", "de", ""),
            ("Save", "fr", "Enregistrer"),
        ] * 40

        def lookup(request: tuple[str, str, str]) -> bool:
            message, language, expected = request
            return source.translate_message("app.app", message, language) == expected

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lookup, requests))

        assert all(results)

    def test_concurrent_misses_keep_single_table(self) -> None:
        """Duplicate loads for one key are harmless; later sentinels stick."""
        workers = 4
        loader = SlowLoader(threading.Barrier(workers))
        source = MessageSource(loader)

        def lookup(message: str) -> str:
            return source.translate_message("app.app", message, "fr")

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lookup, ["Save", "Gone", "Save", "Gone"]))

        assert results == ["Enregistrer", "", "Enregistrer", ""]
        assert loader.calls["messages/fr/app"] == workers
        # All threads now share the table stored first, sentinels included
        assert source.translate_message("app.app", "Gone", "fr") == ""
        assert source.translate_message("app.app", "Save", "fr") == "Enregistrer"
        assert loader.calls["messages/fr/app"] == workers
