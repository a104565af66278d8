from __future__ import annotations

import threading
from typing import Optional

from django.conf import settings

from .puzzles import GeneGameService, GeneNamesClient, MemoCache
from .puzzles.registry import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .puzzles.spelling import MAX_ITERS

_lock = threading.Lock()
_service: Optional[GeneGameService] = None


def build_service() -> GeneGameService:
    """Build a service from Django settings (registry URL, timeout, cache policy)."""
    client = GeneNamesClient(
        base_url=getattr(settings, "GENENAMES_API_URL", DEFAULT_API_URL),
        timeout=getattr(settings, "GENENAMES_TIMEOUT", DEFAULT_TIMEOUT),
    )
    cache = MemoCache(cache_failures=getattr(settings, "GENEDLE_CACHE_FAILURES", False))
    return GeneGameService(
        registry=client,
        cache=cache,
        max_iters=getattr(settings, "GENEDLE_SPELLING_MAX_ITERS", MAX_ITERS),
    )


# PUBLIC_INTERFACE
def get_service() -> GeneGameService:
    """Return the process-wide service, creating it on first use."""
    global _service
    with _lock:
        if _service is None:
            _service = build_service()
        return _service


# PUBLIC_INTERFACE
def set_service(service: Optional[GeneGameService]) -> None:
    """Replace the process-wide service (None rebuilds it from settings on next use)."""
    global _service
    with _lock:
        _service = service
