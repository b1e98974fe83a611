"""
Add-record form handling.

Turns raw text input into a FitnessRecord. Only two checks exist: the
exercise name must be non-empty, and the legacy duration field must be an
integer. Parameter values are stored exactly as typed.
"""

import re
from collections.abc import Iterable, Sequence
from datetime import datetime

from .models import PARAMETER_TYPES, FitnessRecord, Parameter


class FormError(Exception):
    """Raised when form input can't be saved as a record."""

    pass


def validate_exercise_name(exercise_name: str) -> str:
    """
    Validate the exercise name.

    Raises:
        FormError: If the name is empty or whitespace only
    """
    if not exercise_name or not exercise_name.strip():
        raise FormError("Exercise name cannot be empty")
    return exercise_name


def build_record(
    exercise_name: str,
    parameter_type: str,
    values: Sequence[tuple[str, str]],
    date: datetime | None = None,
    notes: str = "",
) -> FitnessRecord:
    """
    Build a new record from add-form input.

    Args:
        exercise_name: Name typed by the user
        parameter_type: "Weight" or "Speed"; applied to every parameter
        values: (name, text) pairs in display order
        date: Selected date (default: now)
        notes: Free text

    Returns:
        New FitnessRecord with fresh ids

    Raises:
        FormError: If the name is empty or the type is unknown
    """
    validate_exercise_name(exercise_name)
    if parameter_type not in PARAMETER_TYPES:
        raise FormError(
            f"Invalid parameter type: {parameter_type}. Must be one of {', '.join(PARAMETER_TYPES)}"
        )

    parameters = [
        Parameter(name=name, type=parameter_type, value=value)  # type: ignore[arg-type]
        for name, value in values
    ]
    return FitnessRecord(
        date=date or datetime.now(),
        exercise_name=exercise_name,
        parameters=parameters,
        notes=notes,
    )


_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def build_duration_record(
    exercise_name: str,
    duration_text: str,
    date: datetime | None = None,
    notes: str = "",
) -> FitnessRecord:
    """
    Build a record from the single-duration form.

    The duration must be a whole number of minutes; it is stored as one
    "Duration" parameter.

    Raises:
        FormError: If the name is empty or the duration isn't an integer
    """
    validate_exercise_name(exercise_name)
    if not _INTEGER_RE.match(duration_text or ""):
        raise FormError(f"Duration must be a whole number of minutes, got {duration_text!r}")

    minutes = int(duration_text)
    return build_record(
        exercise_name,
        "Speed",
        [("Duration", str(minutes))],
        date=date,
        notes=notes,
    )


def parse_parameter_assignments(items: Iterable[str]) -> list[tuple[str, str]]:
    """
    Parse "Name=value" strings.

    Examples:
        "Weight=80"          → ("Weight", "80")
        "Reps per Set = 10"  → ("Reps per Set", "10")
        "Sets="              → ("Sets", "")

    Raises:
        FormError: If an item has no '=' or an empty name
    """
    pairs: list[tuple[str, str]] = []
    for item in items:
        name, sep, value = item.partition("=")
        if not sep:
            raise FormError(f"Invalid parameter '{item}'. Use Name=value, e.g. Weight=80")
        name = name.strip()
        if not name:
            raise FormError(f"Invalid parameter '{item}': name is empty")
        pairs.append((name, value.strip()))
    return pairs
