"""
Centralized configuration for Split Bill, read from the environment.

All settings use the SPLITBILL_ prefix and are read once at import time.
"""

import os

# Currency display
CURRENCY_CODE = os.getenv("SPLITBILL_CURRENCY_CODE", "IDR")
CURRENCY_SYMBOL = os.getenv("SPLITBILL_CURRENCY_SYMBOL", "Rp")
THOUSANDS_SEPARATOR = os.getenv("SPLITBILL_THOUSANDS_SEPARATOR", ".")

# Logging
LOG_LEVEL = os.getenv("SPLITBILL_LOG_LEVEL", "INFO").upper()

# Servers
WEB_HOST = os.getenv("SPLITBILL_WEB_HOST", "0.0.0.0")
WEB_PORT = int(os.getenv("SPLITBILL_WEB_PORT", "5000"))
API_HOST = os.getenv("SPLITBILL_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("SPLITBILL_API_PORT", "8000"))
