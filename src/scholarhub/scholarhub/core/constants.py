"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

DEFAULT_DASHBOARD_DAYS = 30
DEFAULT_TEACHER_ID = 1

SUGGESTED_SUBJECTS = (
    "Mathematics",
    "English Language Arts",
    "Science",
    "Social Studies",
    "History",
    "Geography",
    "Biology",
    "Chemistry",
    "Physics",
    "Art",
    "Music",
    "Physical Education",
    "Computer Science",
    "Foreign Language",
)
