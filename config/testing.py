SECRET_KEY = "test-secret"

ATTENDANCE_API = {
    "base_url": "http://attendance.test/api",
    "token": "test-token",
    "timeout": 5,
}

SPLIT_LATE_EARLY_DOTS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
