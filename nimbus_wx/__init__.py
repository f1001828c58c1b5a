"""
Nearest weather station lookup and METAR decoding.

This package locates the reporting station closest to a position and decodes
its METAR into structured conditions with a flight category.

The main public API includes:
- StationDirectory: Immutable station table loaded from airport-codes text
- NearestStationLocator: Great-circle nearest-station search
- decode: Raw METAR text to classified WeatherConditions
- AvWxSource: Live METAR retrieval from aviationweather.gov
- WeatherBriefing: Position-to-conditions pipeline
"""

from nimbus_wx.models import NavPoint, StationRecord, StationDirectory
from nimbus_wx.locator import NearestStationLocator
from nimbus_wx.weather import WeatherConditions, FlightCategory, classify, decode
from nimbus_wx.sources import AvWxSource
from nimbus_wx.briefing import WeatherBriefing, StationWeather
from nimbus_wx.exceptions import NimbusError, WeatherFetchError, StationNotReporting

__version__ = '0.1.0'
__all__ = [
    'NavPoint',
    'StationRecord',
    'StationDirectory',
    'NearestStationLocator',
    'WeatherConditions',
    'FlightCategory',
    'classify',
    'decode',
    'AvWxSource',
    'WeatherBriefing',
    'StationWeather',
    'NimbusError',
    'WeatherFetchError',
    'StationNotReporting',
]
