import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# External attendance history API (records per member and month)
ATTENDANCE_API = {
    "base_url": os.getenv("ATTENDANCE_API_URL", "http://localhost:5000/api"),
    "token": os.getenv("ATTENDANCE_API_TOKEN"),
    "timeout": float(os.getenv("ATTENDANCE_API_TIMEOUT", "20")),
}

# Draw a late dot and an early-out dot for combined statuses
SPLIT_LATE_EARLY_DOTS = bool(int(os.getenv("SPLIT_LATE_EARLY_DOTS", "0")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
