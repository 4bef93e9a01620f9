UNIVERSITY_NAME = "Test University"
STUDENT_EMAIL_DOMAIN = "student.univ.edu"
ID_SEED = 1000

DEBUG = False
TESTING = True

LOG_LEVEL = "DEBUG"
LOG_FORMAT = "text"
LOG_FILE = None

SEED_DEMO_DATA = False
