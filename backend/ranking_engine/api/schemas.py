from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from ranking_engine.domain.models import (
    Coordinate,
    Event,
    RankingRequest,
    RankingResponse,
    UserContext,
)

DEFAULT_MAX_DISTANCE_KM = float(os.getenv("RANKING_DEFAULT_MAX_DISTANCE_KM", "50"))
DEFAULT_LIMIT = int(os.getenv("RANKING_DEFAULT_LIMIT", "100"))
DEFAULT_EVENT_DURATION = timedelta(hours=1)


class UserLocationIn(BaseModel):
    latitude: float
    longitude: float
    preferred_categories: List[str] = Field(default_factory=list)
    current_time: Optional[datetime] = Field(
        default=None, description="Reference instant; server clock when omitted"
    )


class EventIn(BaseModel):
    id: str = ""
    title: str = ""
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    category: str = ""
    view_count: int = Field(default=0, ge=0)
    save_count: int = Field(default=0, ge=0)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    created_at: Optional[datetime] = None


class RankRequestIn(BaseModel):
    user_location: UserLocationIn
    events: List[EventIn]
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM
    limit: int = DEFAULT_LIMIT


class SearchRequestIn(RankRequestIn):
    query: str = ""


class RankedEventOut(BaseModel):
    id: str
    title: str
    description: str
    latitude: float
    longitude: float
    category: str
    distance_km: float
    score: float


class RankResponseOut(BaseModel):
    ranked_events: List[RankedEventOut]
    total_count: int
    processing_time_ms: float


class SearchResponseOut(RankResponseOut):
    query: str


def to_domain_event(payload: EventIn, now: datetime) -> Event:
    start = payload.start_time or now
    return Event(
        id=payload.id,
        title=payload.title,
        description=payload.description,
        location=Coordinate(payload.latitude, payload.longitude),
        start_time=start,
        end_time=payload.end_time or start + DEFAULT_EVENT_DURATION,
        created_at=payload.created_at or now,
        category=payload.category,
        view_count=payload.view_count,
        save_count=payload.save_count,
    )


def to_domain_request(payload: RankRequestIn, now: Optional[datetime] = None) -> RankingRequest:
    now = now or datetime.now(timezone.utc)
    user = payload.user_location
    return RankingRequest(
        user=UserContext(
            location=Coordinate(user.latitude, user.longitude),
            current_time=user.current_time or now,
            preferred_categories=tuple(user.preferred_categories),
        ),
        events=[to_domain_event(item, now) for item in payload.events],
        max_distance_km=payload.max_distance_km,
        limit=payload.limit,
    )


def ranked_event_out(event: Event) -> RankedEventOut:
    return RankedEventOut(
        id=event.id,
        title=event.title,
        description=event.description,
        latitude=event.location.lat,
        longitude=event.location.lon,
        category=event.category,
        distance_km=event.distance_km,
        score=event.score,
    )


def rank_response_out(response: RankingResponse) -> RankResponseOut:
    return RankResponseOut(
        ranked_events=[ranked_event_out(e) for e in response.ranked_events],
        total_count=response.total_count,
        processing_time_ms=response.processing_time_ms,
    )


def search_response_out(response: RankingResponse, query: str) -> SearchResponseOut:
    return SearchResponseOut(
        query=query,
        ranked_events=[ranked_event_out(e) for e in response.ranked_events],
        total_count=response.total_count,
        processing_time_ms=response.processing_time_ms,
    )
