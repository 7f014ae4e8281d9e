from datetime import datetime, timedelta

from ranking_engine.domain.dedup import are_duplicates, deduplicate, title_overlap
from ranking_engine.domain.models import Coordinate, Event

START = datetime(2026, 3, 1, 20, 0, 0)


def make_event(event_id: str, title: str, lat: float = 0.0, lon: float = 0.0, start: datetime = START) -> Event:
    return Event(
        id=event_id,
        title=title,
        location=Coordinate(lat, lon),
        start_time=start,
        end_time=start + timedelta(hours=2),
        created_at=START - timedelta(days=1),
        category="music",
    )


def test_title_overlap_uses_longest_title():
    assert title_overlap("Jazz Night", "jazz night!") == 1.0
    assert title_overlap("Jazz Night", "Jazz Night Downtown Special") == 0.5
    assert title_overlap("", "...") == 0.0


def test_same_venue_time_and_title_are_duplicates():
    e1 = make_event("a", "Jazz Night")
    e2 = make_event("b", "jazz night", lon=0.0005, start=START + timedelta(minutes=10))
    assert are_duplicates(e1, e2)
    assert are_duplicates(e2, e1)


def test_different_venue_is_not_duplicate():
    e1 = make_event("a", "Jazz Night")
    e2 = make_event("b", "Jazz Night", lat=0.01)
    assert not are_duplicates(e1, e2)


def test_different_time_is_not_duplicate():
    e1 = make_event("a", "Jazz Night")
    e2 = make_event("b", "Jazz Night", start=START + timedelta(hours=1, seconds=1))
    assert not are_duplicates(e1, e2)
    e3 = make_event("c", "Jazz Night", start=START - timedelta(hours=1))
    assert are_duplicates(e1, e3)


def test_different_title_is_not_duplicate():
    e1 = make_event("a", "Jazz Night")
    e2 = make_event("b", "Jazz Night Downtown")
    # 2/3 overlap is not above the 0.7 threshold
    assert not are_duplicates(e1, e2)


def test_deduplicate_keeps_first_representative():
    events = [
        make_event("a", "Jazz Night"),
        make_event("b", "Farmers Market"),
        make_event("c", "Jazz Night", start=START + timedelta(minutes=5)),
        make_event("d", "farmers market", lon=0.0002),
    ]
    assert [e.id for e in deduplicate(events)] == ["a", "b"]


def test_deduplicate_is_idempotent():
    events = [
        make_event("a", "Jazz Night"),
        make_event("b", "Jazz Night", start=START + timedelta(minutes=30)),
        make_event("c", "Jazz Night", start=START + timedelta(minutes=90)),
        make_event("d", "Rock Show", lat=1.0),
    ]
    once = deduplicate(events)
    assert deduplicate(once) == once
    assert [e.id for e in once] == ["a", "c", "d"]


def test_deduplicate_empty():
    assert deduplicate([]) == []
