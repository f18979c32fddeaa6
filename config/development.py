import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON document holding the roster and all attendance buckets
DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

# Subject used by the date-only attendance endpoints
DEFAULT_SUBJECT = os.getenv("DEFAULT_SUBJECT", "general")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
