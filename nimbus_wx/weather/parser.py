"""METAR decoding entry point: tokenize, decode, classify."""

import logging
from typing import Optional

from nimbus_wx.weather.models import WeatherConditions
from nimbus_wx.weather.tokenizer import ReportTokenizer
from nimbus_wx.weather.decoder import ReportDecoder
from nimbus_wx.weather.analysis import WeatherAnalyzer

logger = logging.getLogger(__name__)


class WeatherParser:
    """
    Parse raw METAR text into classified WeatherConditions.

    Parsing is best effort and never fails: an empty or garbled report
    yields default conditions (10 SM, unlimited ceiling, VFR).

    Example:
        conditions = WeatherParser.parse_metar(
            "KJFK 211251Z 36010KT 1 1/2SM BR OVC007 12/11 A2992"
        )
        conditions.flight_category  # FlightCategory.IFR
    """

    @classmethod
    def parse_metar(cls, raw_text: Optional[str]) -> WeatherConditions:
        """
        Args:
            raw_text: Raw report text, kept verbatim in the result

        Returns:
            WeatherConditions with the flight category computed
        """
        raw_text = raw_text or ""
        tokens = ReportTokenizer.tokenize(raw_text)
        if not tokens:
            logger.debug("Empty report, using default conditions")
        conditions = ReportDecoder.decode(tokens, raw_text=raw_text)
        return WeatherAnalyzer.classified(conditions)


def decode(raw_text: Optional[str]) -> WeatherConditions:
    """Decode and classify a raw METAR report."""
    return WeatherParser.parse_metar(raw_text)
