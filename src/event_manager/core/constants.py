"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSION_TTL_HOURS = 24
DEFAULT_POOL_SIZE = 15
# seconds a unit of work waits for a free pooled connection
DEFAULT_POOL_TIMEOUT = 30

MIN_CANDIDATE_AGE = 4
PHONE_DIGITS = 10

ATTENDANCE_POINTS = 100
ATTENDANCE_REASON = "Attendance Day {day}"

POINTS_SERIES_DAYS = 7
LEADERBOARD_SIZE = 3
ACTIVITY_FEED_LIMIT = 5
EVENT_SEARCH_LIMIT = 20
