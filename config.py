"""
BB Sight Configuration
Override settings with environment variables
"""
import logging
import os

from ratio import fraction_type

# App settings
APP_NAME = "BB Sight"
VERSION = "0.1.0"

# Numeric domain for the fraction calculator. Only int64 keeps lateral drift
# monotonic in spin; narrower domains saturate within the first step.
SUPPORTED_INTEGER_DOMAINS = ("int64",)
INTEGER_DOMAIN = os.getenv("BBSIGHT_INTEGER_DOMAIN", "int64")
if INTEGER_DOMAIN not in SUPPORTED_INTEGER_DOMAINS:
    raise ValueError(f"Unsupported BBSIGHT_INTEGER_DOMAIN: {INTEGER_DOMAIN}")
DEFAULT_FRACTION = fraction_type(INTEGER_DOMAIN)

# Logging
LOG_LEVEL = logging.getLevelName(os.getenv("BBSIGHT_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    raise ValueError(f"Unknown BBSIGHT_LOG_LEVEL: {os.getenv('BBSIGHT_LOG_LEVEL')}")

# Display (SSD1351 panel in 128x96 mode)
DISPLAY_WIDTH_PX = 128
DISPLAY_HEIGHT_PX = 96

# Drift table range in meters
MAX_RANGE_M = 50
