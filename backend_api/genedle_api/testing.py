"""In-memory symbol registry used by the test suites."""
from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from .puzzles.errors import LookupFailure
from .puzzles.registry import RegistryResponse


class FakeRegistry:
    """Scripted SymbolRegistry over a fixed list of symbols.

    Parameters:
        symbols: the registry contents, returned in this order
        status: registry status reported with every answer
        fail: raise LookupFailure on every query (simulates a timeout)
        num_found_extra: added to num_found to mimic a truncated answer
    """

    def __init__(
        self,
        symbols: Iterable[str] = (),
        status: int = 0,
        fail: bool = False,
        num_found_extra: int = 0,
    ) -> None:
        self.symbols: List[str] = list(symbols)
        self.status = status
        self.fail = fail
        self.num_found_extra = num_found_extra
        self.queries: List[str] = []
        self._lock = threading.Lock()

    def _answer(self, query: str, matched: List[str]) -> RegistryResponse:
        with self._lock:
            self.queries.append(query)
        if self.fail:
            raise LookupFailure(f"Unable to query registry for {query}")
        if self.status != 0:
            return RegistryResponse(status=self.status, num_found=0, symbols=[])
        return RegistryResponse(
            status=0, num_found=len(matched) + self.num_found_extra, symbols=matched
        )

    def prefix(self, text: str) -> RegistryResponse:
        return self._answer(f"{text}*", [s for s in self.symbols if s.startswith(text)])

    def suffix(self, text: str) -> RegistryResponse:
        return self._answer(f"*{text}", [s for s in self.symbols if s.endswith(text)])

    def exact(self, text: str) -> RegistryResponse:
        return self._answer(text, [s for s in self.symbols if s == text])

    def count(self, query: Optional[str] = None) -> int:
        """Number of queries issued, optionally only those equal to ``query``."""
        with self._lock:
            if query is None:
                return len(self.queries)
            return self.queries.count(query)


def single_symbol_registry(symbol: str) -> FakeRegistry:
    """Registry where every letter resolves to ``symbol``; pins the daily word."""
    return _AnyPrefixRegistry([symbol])


class _AnyPrefixRegistry(FakeRegistry):
    def prefix(self, text: str) -> RegistryResponse:
        return self._answer(f"{text}*", list(self.symbols))
