"""
Data models for fitness-tracker.

A FitnessRecord is one logged exercise: a date, the exercise name, an ordered
list of free-form parameters and notes. Parameter values are kept as entered
text; nothing at the model level checks that they are numeric.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

ParameterType = Literal["Weight", "Speed"]

# Closed set of parameter families, in display order
PARAMETER_TYPES: tuple[str, ...] = ("Weight", "Speed")


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Parameter:
    """
    One named measurement attached to a record (e.g. weight, sets).

    ``type`` tags the unit family; the displayed unit is looked up by ``name``
    (see parameters.unit_for).
    """

    name: str
    type: ParameterType
    value: str = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        """Validate parameter data."""
        if not isinstance(self.name, str):
            raise ValueError(f"Parameter name must be a string, got {type(self.name).__name__}")
        if not isinstance(self.value, str):
            raise ValueError(f"Parameter value must be a string, got {type(self.value).__name__}")
        if self.type not in PARAMETER_TYPES:
            raise ValueError(
                f"Invalid parameter type: {self.type!r}. Must be one of {PARAMETER_TYPES}"
            )
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Parameter id must be a non-empty string")


@dataclass(frozen=True)
class FitnessRecord:
    """
    A logged exercise entry.

    Records are never edited once created; ``id`` is the only identity used
    for lookup and deletion.
    """

    date: datetime
    exercise_name: str
    parameters: list[Parameter] = field(default_factory=list)
    notes: str = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        """Validate record data."""
        if not isinstance(self.date, datetime):
            raise ValueError(f"date must be a datetime, got {type(self.date).__name__}")
        if not isinstance(self.exercise_name, str):
            raise ValueError(
                f"exercise_name must be a string, got {type(self.exercise_name).__name__}"
            )
        if not isinstance(self.notes, str):
            raise ValueError(f"notes must be a string, got {type(self.notes).__name__}")
        if not isinstance(self.parameters, list):
            raise ValueError(f"parameters must be a list, got {type(self.parameters).__name__}")
        for p in self.parameters:
            if not isinstance(p, Parameter):
                raise ValueError(f"parameters must hold Parameter objects, got {type(p).__name__}")
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("id must be a non-empty string")
