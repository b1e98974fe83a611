"""
Configuration constants for fitness-tracker.

Storage locations and fixed identifiers are centralized here.
"""

from typing import Final

# =============================================================================
# PERSISTENCE
# =============================================================================

RECORDS_KEY: Final[str] = "fitnessRecords"  # Settings key holding the record blob

DATA_DIR_NAME: Final[str] = ".fitness-tracker"  # Under the user's home directory
SETTINGS_FILE_NAME: Final[str] = "settings.json"
USER_CONFIG_FILE_NAME: Final[str] = "config.yaml"

# =============================================================================
# FORM DEFAULTS
# =============================================================================

DEFAULT_PARAMETER_TYPE: Final[str] = "Weight"
DATE_INPUT_FORMAT: Final[str] = "%Y-%m-%d"  # --date option / prompts
