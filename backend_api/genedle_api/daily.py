from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

WORD_KEY = "genedle.word"


# Light-weight protocol instead of importing Django's SessionBase.
@runtime_checkable
class _SessionLike(Protocol):
    """Minimal mapping interface required from a session store."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def __setitem__(self, key: str, value: Any) -> None: ...


def word_of_the_day(today: Optional[date] = None) -> int:
    """Day number of ``today`` (UTC by default), counting 0001-01-01 as day 1."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return today.toordinal()


# PUBLIC_INTERFACE
def init_word(session: _SessionLike, today: Optional[date] = None) -> int:
    """Return the session's Genedle seed, storing today's on first visit.

    Parameters:
        session: the player's session store (e.g. ``request.session``)
        today: date to derive the seed from when none is stored yet

    Returns:
        The integer seed the player keeps using for repeat visits.
    """
    selected = session.get(WORD_KEY)
    if selected is None:
        selected = word_of_the_day(today)
        session[WORD_KEY] = selected
    return int(selected)
