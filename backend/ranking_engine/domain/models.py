from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    location: Coordinate
    start_time: datetime
    end_time: datetime
    created_at: datetime
    description: str = ""
    category: str = ""
    view_count: int = 0
    save_count: int = 0
    # Filled in by the ranking pipeline on its own copies
    distance_km: float = 0.0
    score: float = 0.0


@dataclass(frozen=True)
class UserContext:
    location: Coordinate
    current_time: datetime
    preferred_categories: Sequence[str] = ()


@dataclass(frozen=True)
class RankingRequest:
    user: UserContext
    events: Sequence[Event]
    max_distance_km: float = 50.0
    limit: int = 100


@dataclass
class RankingResponse:
    ranked_events: List[Event] = field(default_factory=list)
    total_count: int = 0
    processing_time_ms: float = 0.0
