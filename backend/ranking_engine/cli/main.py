import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ranking_engine.api.schemas import RankRequestIn, to_domain_request
from ranking_engine.domain.models import RankingResponse
from ranking_engine.domain.ranking import rank_events, search_and_rank

app = typer.Typer(help="CLI to rank nearby events from a request file")


def _load_request(path: Path) -> RankRequestIn:
    try:
        payload = json.loads(path.read_text())
        return RankRequestIn.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        typer.echo(f"Invalid request file {path}: {exc}", err=True)
        raise typer.Exit(code=1)


def _print_response(response: RankingResponse) -> None:
    if not response.ranked_events:
        typer.echo("No events matched the request")
        raise typer.Exit(code=0)
    typer.echo("score\tdistance_km\tid\ttitle")
    for event in response.ranked_events:
        typer.echo(f"{event.score:.3f}\t{event.distance_km:.3f}\t{event.id}\t{event.title}")
    typer.echo(
        f"returned={len(response.ranked_events)} total={response.total_count} "
        f"elapsed_ms={response.processing_time_ms:.3f}"
    )


@app.command("rank")
def cli_rank(
    file: Path = typer.Option(..., help="JSON request with user_location and events"),
    limit: Optional[int] = typer.Option(None, help="Override the request limit"),
):
    body = _load_request(file)
    if limit is not None:
        body.limit = limit
    _print_response(rank_events(to_domain_request(body)))


@app.command("search")
def cli_search(
    file: Path = typer.Option(..., help="JSON request with user_location and events"),
    query: str = typer.Option(..., help="Free-text query"),
    limit: Optional[int] = typer.Option(None, help="Override the request limit"),
):
    body = _load_request(file)
    if limit is not None:
        body.limit = limit
    _print_response(search_and_rank(to_domain_request(body), query))


if __name__ == "__main__":
    app()
