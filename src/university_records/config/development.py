import os

UNIVERSITY_NAME = os.getenv("UNIVERSITY_NAME", "Arcadia University")
STUDENT_EMAIL_DOMAIN = os.getenv("STUDENT_EMAIL_DOMAIN", "student.univ.edu")
ID_SEED = int(os.getenv("ID_SEED", "1000"))

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
LOG_FILE = os.getenv("LOG_FILE") or None

# Optional: register a few sample records on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
