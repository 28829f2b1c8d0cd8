from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable

from weather_app.schemas import SearchHistoryEntry, UnitPreference, WeatherReading


logger = logging.getLogger(__name__)


class SearchHistory:
    """Append-only, in-memory log of completed searches.

    Appends are serialized so that insertion order always matches capture
    order; timestamps never go backwards even if the wall clock does.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._entries: list[SearchHistoryEntry] = []
        self._last_captured: datetime | None = None
        self._lock = threading.Lock()

    def append(
        self, location: str, reading: WeatherReading | None = None, units: UnitPreference | None = None
    ) -> SearchHistoryEntry:
        with self._lock:
            captured = self._clock()
            if self._last_captured is not None and captured < self._last_captured:
                captured = self._last_captured
            self._last_captured = captured

            entry = SearchHistoryEntry(
                location=location,
                timestamp=captured.isoformat(),
                reading=reading,
                units=units or UnitPreference(),
            )
            self._entries.append(entry)

        logger.debug("Recorded search for %r (reading=%s)", location, "yes" if reading is not None else "no")
        return entry

    def entries(self) -> tuple[SearchHistoryEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
