"""Shared dataset loading for CLI commands."""

import asyncio

import typer

from election_api.core.config import get_settings
from election_api.services.dataset_service import DatasetState, load_dataset


def load_or_exit(*, need_boundaries: bool = False) -> DatasetState:
    """Load the configured datasets, exiting with code 1 if a needed one failed."""
    state = asyncio.run(load_dataset(get_settings()))
    if state.results_error is not None:
        typer.echo(f"Error: {state.results_error}", err=True)
        raise typer.Exit(code=1)
    if need_boundaries and state.boundaries_error is not None:
        typer.echo(f"Error: {state.boundaries_error}", err=True)
        raise typer.Exit(code=1)
    return state
