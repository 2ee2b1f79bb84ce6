MONTHS_PER_YEAR = 12

# Trip defaults (temperatures in degrees Fahrenheit)
DEFAULT_START_MONTH = 1
DEFAULT_INTERVAL = "1 week"
DEFAULT_MIN_TEMP = 0
DEFAULT_MAX_TEMP = 105

# Separator used when rendering a path as text
PATH_SEPARATOR = " => "

# Units accepted in interval strings such as "2 weeks"
INTERVAL_UNITS = {
    "day": "day",
    "days": "day",
    "week": "week",
    "weeks": "week",
    "month": "month",
    "months": "month",
    "year": "year",
    "years": "year",
}
