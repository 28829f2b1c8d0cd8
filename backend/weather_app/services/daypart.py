from __future__ import annotations

from datetime import datetime, time
from enum import Enum


class Daypart(str, Enum):
    MORNING = "morning"
    NOON = "noon"
    AFTERNOON = "afternoon"
    EVENING = "evening"


# Half-open [start, end) windows; anything outside them is evening.
DAYPART_WINDOWS = (
    (time(5, 0), time(12, 0), Daypart.MORNING),
    (time(12, 0), time(16, 0), Daypart.NOON),
    (time(16, 0), time(18, 0), Daypart.AFTERNOON),
)

DAYPART_BACKGROUNDS = {
    Daypart.MORNING: "bg/morning.jpg",
    Daypart.NOON: "bg/noon.jpg",
    Daypart.AFTERNOON: "bg/afternoon.jpg",
    Daypart.EVENING: "bg/evening.jpg",
}


def classify(now: time | datetime) -> Daypart:
    """Map a local wall-clock reading to its day part."""
    if isinstance(now, datetime):
        now = now.time()
    now = now.replace(tzinfo=None)

    for start, end, daypart in DAYPART_WINDOWS:
        if start <= now < end:
            return daypart
    return Daypart.EVENING


def background_for(now: time | datetime) -> str:
    return DAYPART_BACKGROUNDS[classify(now)]
