"""Constants for recurdate.

This module centralizes all magic numbers and default values used throughout the application.
"""


# Rule constraints
MIN_INTERVAL = 1
MAX_INTERVAL = 365

# Open-ended rules stop this many years after the start date
DEFAULT_RANGE_YEARS = 1

# Expansion safety bound (loop steps, not emitted dates)
DEFAULT_MAX_ITERATIONS = 1000

# Preview shows at most this many dates
DEFAULT_PREVIEW_LIMIT = 50
