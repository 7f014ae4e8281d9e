from __future__ import annotations

import logging

from fastapi import APIRouter

from ranking_engine.api.schemas import (
    RankRequestIn,
    RankResponseOut,
    SearchRequestIn,
    SearchResponseOut,
    rank_response_out,
    search_response_out,
    to_domain_request,
)
from ranking_engine.domain.ranking import rank_events, search_and_rank

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ranking"])


@router.post("/rank", response_model=RankResponseOut)
def rank(payload: RankRequestIn):
    request = to_domain_request(payload)
    response = rank_events(request)
    _log_response("rank", len(request.events), response)
    return rank_response_out(response)


@router.post("/search", response_model=SearchResponseOut)
def search(payload: SearchRequestIn):
    request = to_domain_request(payload)
    response = search_and_rank(request, payload.query)
    _log_response("search", len(request.events), response)
    return search_response_out(response, payload.query)


def _log_response(endpoint: str, candidates: int, response) -> None:
    logger.info(
        "[%s] candidates=%d returned=%d total=%d elapsed_ms=%.3f",
        endpoint,
        candidates,
        len(response.ranked_events),
        response.total_count,
        response.processing_time_ms,
    )
