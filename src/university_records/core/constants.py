"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_UNIVERSITY_NAME = "Arcadia University"
DEFAULT_ID_SEED = 1000
DEFAULT_STUDENT_EMAIL_DOMAIN = "student.univ.edu"
ISO_DATE_FORMAT = "%Y-%m-%d"
