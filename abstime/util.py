"""Unit constants shared by the abstime modules.

Time unit constants represent durations in seconds. The reference-second
timeline is built from these, so every module agrees on the same scale.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

# Field names of a date-time, in order of decreasing magnitude
FIELDS = ("year", "month", "day", "hours", "minutes", "seconds")
