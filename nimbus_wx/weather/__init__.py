"""
METAR decoding and flight category classification.

Example usage:
    from nimbus_wx.weather import decode, FlightCategory

    conditions = decode("KJFK 211251Z 36010KT 10SM BKN020 OVC007 12/11 A2992")
    assert conditions.ceiling_ft == 700
    assert conditions.flight_category == FlightCategory.IFR
"""

from nimbus_wx.weather.models import WeatherConditions, FlightCategory, UNLIMITED_CEILING_FT
from nimbus_wx.weather.tokenizer import ReportTokenizer
from nimbus_wx.weather.decoder import ReportDecoder
from nimbus_wx.weather.analysis import FlightCategoryClassifier, WeatherAnalyzer, classify
from nimbus_wx.weather.parser import WeatherParser, decode

__all__ = [
    # Models
    'WeatherConditions',
    'FlightCategory',
    'UNLIMITED_CEILING_FT',
    # Pipeline stages
    'ReportTokenizer',
    'ReportDecoder',
    'FlightCategoryClassifier',
    'WeatherAnalyzer',
    'WeatherParser',
    # Entry points
    'classify',
    'decode',
]
