import os

UNIVERSITY_NAME = os.getenv("UNIVERSITY_NAME", "Arcadia University")
STUDENT_EMAIL_DOMAIN = os.getenv("STUDENT_EMAIL_DOMAIN", "student.univ.edu")
ID_SEED = int(os.getenv("ID_SEED", "1000"))

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
LOG_FILE = os.getenv("LOG_FILE") or None

SEED_DEMO_DATA = False
