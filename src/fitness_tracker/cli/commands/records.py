"""Record commands: add, list, delete, and helpers."""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.config import DATE_INPUT_FORMAT, DEFAULT_PARAMETER_TYPE
from ...core.config_loader import load_user_config
from ...core.forms import (
    FormError,
    build_duration_record,
    build_record,
    parse_parameter_assignments,
    validate_exercise_name,
)
from ...core.models import PARAMETER_TYPES
from ...core.parameters import default_parameters, unit_for
from ...core.records import RecordLog
from ...io.serializers import record_to_dict
from .. import views
from ..app import SettingsPathOption, app, get_store

_TYPE_BY_KEY: dict[str, str] = {t.lower(): t for t in PARAMETER_TYPES}


def _configured_parameter_type() -> str:
    """Default parameter type from user config, else the built-in default."""
    return load_user_config().get("default_parameter_type", DEFAULT_PARAMETER_TYPE)


def _normalize_type(raw: str) -> str | None:
    """Map user input ("weight", "2", "Speed") to a parameter type, or None."""
    raw = raw.strip()
    if raw.isdigit() and 1 <= int(raw) <= len(PARAMETER_TYPES):
        return PARAMETER_TYPES[int(raw) - 1]
    return _TYPE_BY_KEY.get(raw.lower())


def _parse_date(raw: str) -> datetime:
    """Parse a YYYY-MM-DD date, raising FormError on bad input."""
    try:
        return datetime.strptime(raw.strip(), DATE_INPUT_FORMAT)
    except ValueError as e:
        raise FormError(f"Invalid date: {raw}. Expected YYYY-MM-DD") from e


def _prompt_exercise_name() -> str:
    while True:
        raw = views.console.input("Exercise name: ").strip()
        try:
            return validate_exercise_name(raw)
        except FormError as e:
            views.print_error(str(e))


def _prompt_parameter_type(default: str) -> str:
    hint = "  ".join(f"[{i}] {t}" for i, t in enumerate(PARAMETER_TYPES, 1))
    views.console.print(f"Parameter type: {hint}")
    while True:
        raw = views.console.input(f"Type [{default}]: ").strip() or default
        parameter_type = _normalize_type(raw)
        if parameter_type:
            return parameter_type
        views.print_error(f"Choose 1–{len(PARAMETER_TYPES)} or type {' / '.join(PARAMETER_TYPES)}")


def _interactive_values(parameter_type: str) -> list[tuple[str, str]]:
    """
    Prompt for each parameter the form offers for the given type.

    Values are taken as typed; an empty answer stores an empty value.
    """
    values: list[tuple[str, str]] = []
    for template in default_parameters(parameter_type):  # type: ignore[arg-type]
        unit = unit_for(template.name)
        label = f"{template.name} ({unit})" if unit else template.name
        values.append((template.name, views.console.input(f"  {label}: ").strip()))
    return values


def _prompt_date() -> datetime:
    default_date = datetime.now().strftime(DATE_INPUT_FORMAT)
    while True:
        raw = views.console.input(f"Date [{default_date}]: ").strip()
        if not raw:
            return datetime.now()
        try:
            return _parse_date(raw)
        except FormError as e:
            views.print_error(str(e))


def _menu_delete_record(settings_path: Path | None = None) -> None:
    """Interactive delete helper called from the main menu."""
    store = get_store(settings_path)
    log = RecordLog.load(store)

    if not len(log):
        views.print_info("No records to delete.")
        return

    views.print_records(log.records)

    while True:
        raw = views.console.input("Delete record ID (Enter to cancel): ").strip()
        if not raw:
            views.print_info("Cancelled.")
            return
        try:
            record_id = log.resolve_id(raw)
        except LookupError as e:
            views.print_error(str(e))
            continue

        target = log.find(record_id)
        if views.confirm_action(f"Delete {target.exercise_name} ({views.short_id(target)})?"):
            log.delete(record_id)
            views.print_success(f"Deleted record {views.short_id(target)}: {target.exercise_name}")
        else:
            views.print_info("Cancelled.")
        return


@app.command("add")
def add_record(
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Exercise name, e.g. Squat"),
    ] = None,
    parameter_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Parameter type: Weight | Speed"),
    ] = None,
    params: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-P", help="Parameter as Name=value, repeatable, e.g. -P Weight=80"),
    ] = None,
    duration: Annotated[
        Optional[str],
        typer.Option("--duration", help="Single duration entry in whole minutes"),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Record date (YYYY-MM-DD, default: today)"),
    ] = None,
    notes: Annotated[
        Optional[str],
        typer.Option("--notes", help="Free-text notes"),
    ] = None,
    settings_path: SettingsPathOption = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Log an exercise.

    Run without options for interactive entry. Or supply options for
    one-liner use:

      fitness-tracker add --name Squat --type Weight \\
        -P Weight=80 -P Sets=3 -P "Reps per Set=10" --date 2025-01-08
    """
    store = get_store(settings_path)

    # ── Interactive prompts for missing values ──────────────────────────────

    was_interactive = not params and duration is None

    if name is None:
        name = _prompt_exercise_name()

    record_date: datetime | None = None
    try:
        if date is not None:
            record_date = _parse_date(date)

        if duration is not None:
            if params:
                raise FormError("Use either --duration or --param, not both")
            if record_date is None:
                record_date = datetime.now()
            record = build_duration_record(name, duration, date=record_date, notes=notes or "")
        else:
            if parameter_type is not None:
                normalized = _normalize_type(parameter_type)
                if normalized is None:
                    raise FormError(
                        f"Parameter type must be one of: {', '.join(PARAMETER_TYPES)}"
                    )
                parameter_type = normalized
            elif was_interactive:
                parameter_type = _prompt_parameter_type(_configured_parameter_type())
            else:
                parameter_type = _configured_parameter_type()

            if not params:
                values = _interactive_values(parameter_type)
            else:
                values = parse_parameter_assignments(params)

            if record_date is None:
                record_date = _prompt_date() if was_interactive else datetime.now()

            if notes is None and was_interactive:
                notes = views.console.input("[dim]Notes (optional, Enter to skip): [/dim]").strip()

            record = build_record(name, parameter_type, values, date=record_date, notes=notes or "")
    except FormError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    # ── Save ────────────────────────────────────────────────────────────────

    log = RecordLog.load(store)
    log.add(record)

    if json_out:
        print(json.dumps(record_to_dict(record), indent=2))
        return

    views.console.print()
    views.print_success(f"Logged {record.exercise_name} ({views.short_id(record)})")
    views.print_record_summary(record)


@app.command("list")
def list_records(
    settings_path: SettingsPathOption = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Display records grouped by day.
    """
    log = RecordLog.load(get_store(settings_path))

    if json_out:
        groups = log.grouped()
        output = {
            label: [record_to_dict(r) for r in groups[label]]
            for label in log.day_labels()
        }
        print(json.dumps(output, indent=2))
        return

    views.print_records(log.records)


@app.command("delete")
def delete_record(
    record_id: Annotated[
        str,
        typer.Argument(help="Record ID or unique prefix (see ID column in list)"),
    ],
    settings_path: SettingsPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """
    Remove a record by its ID.

    Use 'list' to see record IDs.
    """
    log = RecordLog.load(get_store(settings_path))

    try:
        full_id = log.resolve_id(record_id)
    except LookupError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    target = log.find(full_id)
    views.console.print("Record to delete:")
    views.print_record_summary(target)

    if not force and not views.confirm_action("Delete this record?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    log.delete(full_id)
    views.print_success(f"Deleted record {views.short_id(target)}: {target.exercise_name}")
