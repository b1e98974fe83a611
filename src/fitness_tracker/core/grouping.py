"""
Group records by calendar day for display.

Day labels are medium-style date strings ("Jan 8, 2025"). Labels are sorted
as plain strings, not by the underlying dates, so the order is only
chronological within a month of the same year.
"""

from datetime import date, datetime

from .models import FitnessRecord


def day_label(when: date | datetime) -> str:
    """
    Format a date as a medium-style day label.

    The month abbreviation follows the active locale (``%b``); the time of
    day is ignored.

    Args:
        when: Date or datetime to format

    Returns:
        Label such as "Jan 8, 2025"
    """
    return f"{when.strftime('%b')} {when.day}, {when.year}"


def group_by_day(records: list[FitnessRecord]) -> dict[str, list[FitnessRecord]]:
    """
    Bucket records by day label.

    Every record lands in exactly one bucket; within a bucket, records keep
    their input order.
    """
    groups: dict[str, list[FitnessRecord]] = {}
    for record in records:
        groups.setdefault(day_label(record.date), []).append(record)
    return groups


def sorted_day_labels(groups: dict[str, list[FitnessRecord]]) -> list[str]:
    """Return the bucket labels in ascending string order."""
    return sorted(groups)
