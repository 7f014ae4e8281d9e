from __future__ import annotations

from typing import Iterable, List

from .geo import haversine_km
from .models import Event
from .scoring import seconds_between
from .text import tokenize

DUPLICATE_MAX_DISTANCE_KM = 0.1
DUPLICATE_MAX_START_DIFF_S = 3600.0
DUPLICATE_MIN_TITLE_OVERLAP = 0.7


def title_overlap(title1: str, title2: str) -> float:
    tokens1 = tokenize(title1)
    tokens2 = tokenize(title2)
    longest = max(len(tokens1), len(tokens2))
    if longest == 0:
        return 0.0
    return len(tokens1 & tokens2) / longest


def are_duplicates(event1: Event, event2: Event) -> bool:
    """Same venue, same hour and mostly the same title. All three must hold."""
    if haversine_km(event1.location, event2.location) > DUPLICATE_MAX_DISTANCE_KM:
        return False
    if abs(seconds_between(event1.start_time, event2.start_time)) > DUPLICATE_MAX_START_DIFF_S:
        return False
    return title_overlap(event1.title, event2.title) > DUPLICATE_MIN_TITLE_OVERLAP


def deduplicate(events: Iterable[Event]) -> List[Event]:
    unique: List[Event] = []
    for event in events:
        if any(are_duplicates(event, kept) for kept in unique):
            continue
        unique.append(event)
    return unique
