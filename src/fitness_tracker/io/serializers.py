"""
JSON serialization for fitness records.

Handles conversion between dataclasses and JSON-compatible dicts. Field
names on the wire ("exerciseName", ...) are fixed so that stored blobs stay
readable across releases.
"""

import json
from datetime import datetime
from typing import Any

from ..core.models import PARAMETER_TYPES, FitnessRecord, Parameter


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_text(data: dict[str, Any], key: str) -> str:
    """
    Fetch a required text field.

    Args:
        data: Dict representation
        key: Field name

    Returns:
        The field value

    Raises:
        ValidationError: If the field is missing or not a string
    """
    if key not in data:
        raise ValidationError(f"Missing field: {key}")
    value = data[key]
    if not isinstance(value, str):
        raise ValidationError(f"Field {key} must be a string, got {type(value).__name__}")
    return value


def validate_timestamp(value: Any) -> datetime:
    """
    Parse an ISO 8601 timestamp.

    Raises:
        ValidationError: If value is not a valid ISO timestamp string
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value!r}. Expected ISO 8601 text")
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value}") from e


def parameter_to_dict(parameter: Parameter) -> dict[str, Any]:
    """Convert Parameter to JSON-compatible dict."""
    return {
        "id": parameter.id,
        "name": parameter.name,
        "type": parameter.type,
        "value": parameter.value,
    }


def dict_to_parameter(data: dict[str, Any]) -> Parameter:
    """
    Convert dict to Parameter.

    Args:
        data: Dict representation

    Returns:
        Parameter instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Parameter must be an object, got {type(data).__name__}")

    parameter_type = validate_text(data, "type")
    if parameter_type not in PARAMETER_TYPES:
        raise ValidationError(
            f"Invalid parameter type: {parameter_type}. Must be one of {PARAMETER_TYPES}"
        )

    try:
        return Parameter(
            id=validate_text(data, "id"),
            name=validate_text(data, "name"),
            type=parameter_type,  # type: ignore
            value=validate_text(data, "value"),
        )
    except ValueError as e:
        raise ValidationError(f"Invalid parameter: {e}") from e


def record_to_dict(record: FitnessRecord) -> dict[str, Any]:
    """
    Convert FitnessRecord to JSON-compatible dict.

    Args:
        record: FitnessRecord to convert

    Returns:
        Dict representation
    """
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "exerciseName": record.exercise_name,
        "parameters": [parameter_to_dict(p) for p in record.parameters],
        "notes": record.notes,
    }


def dict_to_record(data: dict[str, Any]) -> FitnessRecord:
    """
    Convert dict to FitnessRecord.

    Blobs written by the old flat schema (a ``duration`` number instead of
    ``parameters``) are rejected here like any other mismatch.

    Args:
        data: Dict representation

    Returns:
        FitnessRecord instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Record must be an object, got {type(data).__name__}")
    if "date" not in data:
        raise ValidationError("Missing field: date")

    raw_parameters = data.get("parameters")
    if not isinstance(raw_parameters, list):
        raise ValidationError("Field parameters must be a list")

    parameters = [dict_to_parameter(p) for p in raw_parameters]

    try:
        return FitnessRecord(
            id=validate_text(data, "id"),
            date=validate_timestamp(data["date"]),
            exercise_name=validate_text(data, "exerciseName"),
            parameters=parameters,
            notes=validate_text(data, "notes"),
        )
    except ValueError as e:
        raise ValidationError(f"Invalid record: {e}") from e


def records_to_json(records: list[FitnessRecord]) -> str:
    """
    Serialize a full record collection to a JSON array.

    Raises:
        TypeError, ValueError: If a record holds values JSON can't encode
    """
    return json.dumps([record_to_dict(r) for r in records], separators=(",", ":"))


def json_to_records(text: str | bytes) -> list[FitnessRecord]:
    """
    Deserialize a JSON array into records.

    Args:
        text: JSON text (str or UTF-8 bytes)

    Returns:
        Records in stored order

    Raises:
        ValidationError: If JSON is invalid or any record fails validation
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValidationError(f"Expected a list of records, got {type(data).__name__}")

    return [dict_to_record(item) for item in data]
