"""Shared Typer app object, shared option types, and store utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.record_store import RecordStore, get_default_store
from ..io.settings_store import JsonFileSettingsStore

# Characters of the record id shown in tables; delete accepts any unique prefix
SHORT_ID_LENGTH = 8

# Shared --settings-path option type used across all commands
SettingsPathOption = Annotated[
    Optional[Path],
    typer.Option("--settings-path", "-p", help="Path to the settings JSON file"),
]

app = typer.Typer(
    name="fitness-tracker",
    help="Log fitness exercises and review them grouped by day.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_store(settings_path: Path | None) -> RecordStore:
    """Get record store from path or the default settings file."""
    if settings_path is None:
        return get_default_store()
    return RecordStore(JsonFileSettingsStore(settings_path))
