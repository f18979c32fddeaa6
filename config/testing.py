import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "data/attendance_test.json")
DEFAULT_SUBJECT = "general"

HOST = "127.0.0.1"
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
