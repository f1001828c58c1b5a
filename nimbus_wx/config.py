#!/usr/bin/env python3

"""
Runtime configuration for nimbus_wx.

Values can be overridden through environment variables.
"""

import os

# aviationweather.gov data API
AVWX_BASE_URL = os.getenv("NIMBUS_AVWX_BASE_URL", "https://aviationweather.gov/api/data")
AVWX_TIMEOUT = float(os.getenv("NIMBUS_AVWX_TIMEOUT", "15"))
USER_AGENT = os.getenv("NIMBUS_USER_AGENT", "nimbus-wx/0.1 (aviation weather tool)")

# Worker threads used by the asynchronous fetch helpers
MAX_FETCH_WORKERS = int(os.getenv("NIMBUS_MAX_FETCH_WORKERS", "4"))

# Station table in airport-codes layout
STATIONS_CSV = os.getenv("NIMBUS_STATIONS_CSV", "airport-codes.csv")

# Station name used when weather is requested for a code typed by hand
MANUAL_ENTRY_NAME = "Manual Entry"
