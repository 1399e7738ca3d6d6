"""Query CLI commands: filtered record listings and aggregate statistics."""

import json

import typer
from pydantic import ValidationError

from election_api.models.filter_state import FilterState

query_app = typer.Typer()


def _build_filters(**options: object) -> FilterState:
    try:
        return FilterState(**{k: v for k, v in options.items() if v is not None})
    except ValidationError as e:
        typer.echo(f"Error: invalid filter: {e}", err=True)
        raise typer.Exit(code=1) from e


@query_app.command("records")
def query_records_cmd(
    search: str | None = typer.Option(None, "--search", help="Free-text search"),
    district: str | None = typer.Option(None, "--district"),
    constituency: str | None = typer.Option(None, "--constituency"),
    party: str | None = typer.Option(None, "--party"),
    alliance: str | None = typer.Option(None, "--alliance", help="DMK+, ADMK+ or Others"),
    year: int | None = typer.Option(None, "--year"),
    position: str | None = typer.Option(None, "--position", help="Rank or DepositLost"),
    winners_only: bool = typer.Option(False, "--winners-only", help="Only position-1 candidates"),
    sort_key: str | None = typer.Option(None, "--sort", help="Record field to sort by"),
    sort_direction: str = typer.Option("asc", "--direction", help="asc or desc"),
    limit: int = typer.Option(20, "--limit", min=1, help="Maximum rows to print"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
) -> None:
    """List records matching the given facets."""
    from election_api.cli._loading import load_or_exit
    from election_api.services.query_service import query_records

    filters = _build_filters(
        search=search,
        district=district,
        constituency=constituency,
        party=party,
        alliance=alliance,
        year=year,
        position=position,
        winners_only=winners_only,
        sort_key=sort_key,
        sort_direction=sort_direction,
    )
    state = load_or_exit()
    try:
        records, total = query_records(state, filters, page=1, page_size=limit)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json", exclude_none=True) for r in records], indent=2))
        return

    typer.echo(f"{total} matching records (showing {len(records)})")
    for r in records:
        typer.echo(
            f"  {r.year}  {r.display_constituency:<28} {r.position:>2}  "
            f"{r.candidate:<30} {r.display_party or '-':<10} {r.votes if r.votes is not None else '-'}"
        )


@query_app.command("stats")
def query_stats_cmd(
    district: str | None = typer.Option(None, "--district"),
    party: str | None = typer.Option(None, "--party"),
    alliance: str | None = typer.Option(None, "--alliance"),
    year: int | None = typer.Option(None, "--year"),
    as_json: bool = typer.Option(False, "--json", help="Print the full statistics as JSON"),
) -> None:
    """Print aggregate statistics for the records matching the given facets."""
    from election_api.cli._loading import load_or_exit
    from election_api.core.config import get_settings
    from election_api.services.query_service import aggregate_records

    filters = _build_filters(district=district, party=party, alliance=alliance, year=year)
    state = load_or_exit()
    settings = get_settings()
    stats = aggregate_records(
        state,
        filters,
        total_seats=settings.total_seats,
        strike_rate_min_contested=settings.strike_rate_min_contested,
    )

    if as_json:
        typer.echo(stats.model_dump_json(indent=2))
        return

    ks = stats.key_stats
    typer.echo(f"Candidates:          {ks.candidates}")
    typer.echo(f"Winners:             {ks.winners}")
    typer.echo(f"Total votes:         {ks.total_votes}")
    typer.echo(f"Avg winning margin:  {ks.average_winning_margin}")
    typer.echo(f"Deposits lost:       {ks.deposit_lost}")
    typer.echo("\nSeats by alliance:")
    for row in stats.alliance_seats:
        typer.echo(f"  {row.label:<10} {row.value}")
    typer.echo("\nSeats by party:")
    for row in stats.party_seats:
        typer.echo(f"  {row.label:<10} {row.value}")
