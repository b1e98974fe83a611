"""
Parameter templates and unit lookup.

Units are looked up by parameter *name*, not by ParameterType: a name that
isn't in the table gets no unit, whatever its type.
"""

from typing import Final

from .models import Parameter, ParameterType

UNIT_BY_NAME: Final[dict[str, str]] = {
    "Weight": "kg",
    "Speed": "km/h",
    "Duration": "minutes",
    "Sets": "",
    "Reps per Set": "",
}

# Parameters offered by the add form for each type, in display order
DEFAULT_PARAMETER_NAMES: Final[dict[str, tuple[str, ...]]] = {
    "Weight": ("Weight", "Sets", "Reps per Set"),
    "Speed": ("Speed", "Duration"),
}


def unit_for(name: str) -> str:
    """Return the display unit for a parameter name ("" when unitless or unknown)."""
    return UNIT_BY_NAME.get(name, "")


def default_parameters(parameter_type: ParameterType) -> list[Parameter]:
    """
    Build the empty parameter entries the add form starts with.

    Args:
        parameter_type: "Weight" or "Speed"

    Returns:
        New Parameter objects with empty values and fresh ids

    Raises:
        ValueError: If parameter_type is unknown
    """
    if parameter_type not in DEFAULT_PARAMETER_NAMES:
        raise ValueError(f"Unknown parameter type: {parameter_type!r}")
    return [
        Parameter(name=name, type=parameter_type)
        for name in DEFAULT_PARAMETER_NAMES[parameter_type]
    ]


def format_parameter(parameter: Parameter) -> str:
    """Format a parameter as 'Name: value unit', e.g. 'Weight: 80 kg'."""
    unit = unit_for(parameter.name)
    text = f"{parameter.name}: {parameter.value}"
    return f"{text} {unit}" if unit else text
