import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ATTENDANCE_API = {
    "base_url": os.getenv("ATTENDANCE_API_URL", ""),
    "token": os.getenv("ATTENDANCE_API_TOKEN"),
    "timeout": float(os.getenv("ATTENDANCE_API_TIMEOUT", "20")),
}

SPLIT_LATE_EARLY_DOTS = bool(int(os.getenv("SPLIT_LATE_EARLY_DOTS", "0")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
