"""Dataset check commands."""

import typer

check_app = typer.Typer()


@check_app.command("reconcile")
def check_reconcile(
    year: int | None = typer.Option(None, "--year", help="Only consider winners from this year"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any feature is unmatched"),
) -> None:
    """Report boundary features that find no constituency result."""
    from election_api.cli._loading import load_or_exit
    from election_api.models.filter_state import FilterState
    from election_api.services.query_service import reconciliation_coverage

    state = load_or_exit(need_boundaries=True)
    report = reconciliation_coverage(state, FilterState(year=year))

    typer.echo(f"Boundary features: {report.total}")
    typer.echo(f"Matched:           {report.matched}")
    typer.echo(f"Unmatched:         {len(report.unmatched)}")
    for name in report.unmatched:
        typer.echo(f"  - {name or '<unnamed>'}")

    if strict and report.unmatched:
        raise typer.Exit(code=1)
