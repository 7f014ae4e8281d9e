from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable
import math

from .geo import distance_score
from .models import Event, UserContext
from .text import NO_QUERY_SIMILARITY, event_text, text_similarity

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0

WEIGHT_DISTANCE = 0.30
WEIGHT_URGENCY = 0.25
WEIGHT_POPULARITY = 0.15
WEIGHT_FRESHNESS = 0.15
WEIGHT_CATEGORY = 0.10
WEIGHT_TEXT = 0.05

# Distance term decays over a fixed radius; max_distance_km only drives filtering
DISTANCE_SCORE_REFERENCE_KM = 50.0
HYPER_LOCAL_KM = 1.0
HYPER_LOCAL_BOOST = 1.2

SAVE_WEIGHT = 3
# ~1000 weighted interactions saturate the popularity score
POPULARITY_LOG_BASE = math.log(1001.0)


def _to_utc_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def seconds_between(earlier: datetime, later: datetime) -> float:
    return (_to_utc_naive(later) - _to_utc_naive(earlier)).total_seconds()


def urgency_score(start_time: datetime, now: datetime) -> float:
    time_diff = seconds_between(now, start_time)
    if time_diff <= 0:
        # already running
        return 0.5
    hours = time_diff / SECONDS_PER_HOUR
    if hours < 2.0:
        return 1.0
    if hours < 24.0:
        return 0.8 - (hours - 2.0) / 22.0 * 0.3
    days = time_diff / SECONDS_PER_DAY
    if days < 7.0:
        return 0.5 - (days - 1.0) / 6.0 * 0.3
    return 0.2


def popularity_score(view_count: int, save_count: int) -> float:
    engagement = view_count + save_count * SAVE_WEIGHT
    if engagement == 0:
        return 0.0
    return min(math.log(engagement + 1.0) / POPULARITY_LOG_BASE, 1.0)


def freshness_score(created_at: datetime, now: datetime) -> float:
    age = seconds_between(created_at, now)
    hours = age / SECONDS_PER_HOUR
    if hours < 1.0:
        return 1.0
    if hours < 24.0:
        return 0.9 - (hours - 1.0) / 23.0 * 0.4
    days = age / SECONDS_PER_DAY
    if days < 7.0:
        return 0.5 - (days - 1.0) / 6.0 * 0.3
    return 0.2


def category_score(category: str, preferred_categories: Iterable[str]) -> float:
    preferred = {c.lower() for c in preferred_categories}
    if not preferred:
        return 0.5
    if category.lower() in preferred:
        return 1.0
    return 0.3


def final_score(event: Event, user: UserContext, query: str = "") -> float:
    """
    Weighted sum of the per-factor scores for an event already annotated
    with ``distance_km``. Events closer than 1 km get a 1.2x boost and the
    result is capped at 1.0.
    """
    text = text_similarity(query, event_text(event)) if query else NO_QUERY_SIMILARITY
    total = (
        WEIGHT_DISTANCE * distance_score(event.distance_km, DISTANCE_SCORE_REFERENCE_KM)
        + WEIGHT_URGENCY * urgency_score(event.start_time, user.current_time)
        + WEIGHT_POPULARITY * popularity_score(event.view_count, event.save_count)
        + WEIGHT_FRESHNESS * freshness_score(event.created_at, user.current_time)
        + WEIGHT_CATEGORY * category_score(event.category, user.preferred_categories)
        + WEIGHT_TEXT * text
    )
    if event.distance_km < HYPER_LOCAL_KM:
        total *= HYPER_LOCAL_BOOST
    return min(total, 1.0)
