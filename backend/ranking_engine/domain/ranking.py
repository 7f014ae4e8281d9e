from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List
import time

from .dedup import deduplicate
from .geo import haversine_km
from .models import Event, RankingRequest, RankingResponse, UserContext
from .scoring import final_score
from .text import event_text, text_similarity

MIN_QUERY_SIMILARITY = 0.1


def rank_events(request: RankingRequest) -> RankingResponse:
    """Filter by distance, drop duplicates, score, sort and cap the candidates."""
    started = time.perf_counter()
    events = _nearby_events(request.events, request.user, request.max_distance_km)
    events = deduplicate(events)
    events = _score(events, request.user)
    return _finish(events, request.limit, started)


def search_and_rank(request: RankingRequest, query: str) -> RankingResponse:
    """
    Like :func:`rank_events`, but the text term uses the query and events
    whose raw similarity to a non-empty query is below 0.1 are dropped.
    """
    started = time.perf_counter()
    events = _nearby_events(request.events, request.user, request.max_distance_km)
    events = deduplicate(events)
    events = _score(events, request.user, query)
    if query:
        events = [e for e in events if text_similarity(query, event_text(e)) >= MIN_QUERY_SIMILARITY]
    return _finish(events, request.limit, started)


def _nearby_events(events: Iterable[Event], user: UserContext, max_distance_km: float) -> List[Event]:
    nearby = []
    for event in events:
        distance = haversine_km(user.location, event.location)
        if distance > max_distance_km:
            continue
        nearby.append(replace(event, distance_km=distance))
    return nearby


def _score(events: Iterable[Event], user: UserContext, query: str = "") -> List[Event]:
    return [replace(event, score=final_score(event, user, query)) for event in events]


def _finish(events: List[Event], limit: int, started: float) -> RankingResponse:
    # stable sort: equal scores keep their post-dedup input order
    events.sort(key=lambda e: e.score, reverse=True)
    total = len(events)
    if limit > 0:
        events = events[:limit]
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    return RankingResponse(ranked_events=events, total_count=total, processing_time_ms=elapsed_ms)
