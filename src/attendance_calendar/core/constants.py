"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import BackgroundColor, DotColor

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_HTTP_TIMEOUT = 20
NO_VALUE = "-"

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

BACKGROUND_HEX = {
    BackgroundColor.GREEN: "#10b981",
    BackgroundColor.RED: "#ef4444",
    BackgroundColor.YELLOW: "#eab308",
    BackgroundColor.ORANGE: "#f97316",
    BackgroundColor.BLUE: "#3b82f6",
    BackgroundColor.PURPLE: "#a855f7",
    BackgroundColor.NEUTRAL: "#9ca3af",
    BackgroundColor.MUTED: "#ffffff",
}

DOT_HEX = {
    DotColor.BLACK: "#000000",
    DotColor.WHITE: "#ffffff",
    DotColor.BLUE: "#3b82f6",
    DotColor.GRAY: "#9ca3af",
}

LIGHT_TEXT_HEX = "#ffffff"
DARK_TEXT_HEX = "#374151"
