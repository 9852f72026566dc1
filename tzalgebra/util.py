"""Utility constants for tzalgebra.

Time unit constants represent durations in milliseconds.
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
WEEK = 604_800_000

# Half a day, the distance between noon and either midnight
HALF_DAY = DAY // 2

# Julian Day Number of 1970-01-01, the date of Moment 0 at offset zero
EPOCH_JDN = 2_440_588
