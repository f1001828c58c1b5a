"""Token-level METAR decoder."""

import re
import logging
from typing import Optional, Sequence

from nimbus_wx.weather.models import (
    WeatherConditions,
    UNLIMITED_CEILING_FT,
    DEFAULT_VISIBILITY_SM,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_ALTIMETER_INHG,
)

logger = logging.getLogger(__name__)

# Hectopascals to inches of mercury
_HPA_TO_INHG = 0.02953

_CEILING_PREFIXES = ("BKN", "OVC", "VV")

_INTEGER_RE = re.compile(r"\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)


class ReportDecoder:
    """
    Decode METAR groups into a WeatherConditions value.

    Every group is tested against every rule, so a malformed or unknown
    group simply matches nothing. Decoding never fails: fields that are not
    found keep their defaults.

    Supported groups:
        wind         36010KT, VRB05KT (direction and first two speed digits)
        visibility   10SM, 1/2SM, and "1 1/2SM" across two groups
        ceiling      BKN020, OVC007 (lowest layer wins)
        temperature  22/10, M05/M10
        altimeter    A2992 (inHg), Q1013 (hPa)

    For every field except ceiling the last matching group wins. The flight
    category is left at its default; see FlightCategoryClassifier.

    Example:
        conditions = ReportDecoder.decode(["KJFK", "36010KT", "1", "1/2SM", "OVC007"])
    """

    @classmethod
    def decode(cls, tokens: Sequence[str], raw_text: str = "") -> WeatherConditions:
        """
        Args:
            tokens: Report groups in report order
            raw_text: Original report text, stored verbatim

        Returns:
            WeatherConditions with the flight category at its default
        """
        wind_direction: Optional[int] = None
        wind_speed = 0
        visibility = DEFAULT_VISIBILITY_SM
        temperature = DEFAULT_TEMPERATURE_C
        altimeter = DEFAULT_ALTIMETER_INHG
        lowest_ceiling: Optional[int] = None

        # Mixed visibility ("1 1/2SM") is the only rule that looks at the
        # previous group; everything else is decided from the group alone.
        previous: Optional[str] = None

        for token in tokens:
            wind = cls._extract_wind(token)
            if wind is not None:
                direction, speed = wind
                if direction is not None:
                    wind_direction = direction
                if speed is not None:
                    wind_speed = speed

            vis = cls._extract_visibility(token, previous)
            if vis is not None:
                visibility = vis

            layer = cls._extract_ceiling_layer(token)
            if layer is not None and (lowest_ceiling is None or layer < lowest_ceiling):
                lowest_ceiling = layer

            temp = cls._extract_temperature(token)
            if temp is not None:
                temperature = temp

            alt = cls._extract_altimeter(token)
            if alt is not None:
                altimeter = alt

            previous = token

        conditions = WeatherConditions(
            raw_text=raw_text,
            wind_direction=wind_direction,
            wind_speed=wind_speed,
            visibility_sm=visibility,
            temperature=temperature,
            altimeter=altimeter,
            ceiling_ft=lowest_ceiling if lowest_ceiling is not None else UNLIMITED_CEILING_FT,
        )
        logger.debug("Decoded %d groups: %s", len(tokens), conditions.to_dict())
        return conditions

    # --- Group extractors ---

    @staticmethod
    def _extract_wind(token: str):
        """
        Wind group as (direction, speed); either may be None.

        Only the first two speed digits are read, so gusts and three-digit
        speeds are ignored.
        """
        if not token.endswith("KT"):
            return None
        body = token[:-2]
        if len(body) < 5:
            return None
        return _parse_int(body[:3]), _parse_int(body[3:5])

    @staticmethod
    def _extract_visibility(token: str, previous: Optional[str]) -> Optional[float]:
        """Statute-mile visibility, adding a preceding whole-number group."""
        if not token.endswith("SM"):
            return None
        value = _parse_visibility_number(token[:-2])
        if value is None:
            return None
        if previous is not None:
            whole = _parse_int(previous)
            if whole is not None:
                value += whole
        return value

    @staticmethod
    def _extract_ceiling_layer(token: str) -> Optional[int]:
        """Height in feet of a broken, overcast or vertical visibility layer."""
        if not token.startswith(_CEILING_PREFIXES) or len(token) < 6:
            return None
        hundreds = _parse_int(token[-3:])
        if hundreds is None:
            return None
        return hundreds * 100

    @staticmethod
    def _extract_temperature(token: str) -> Optional[float]:
        """Temperature from a temperature/dewpoint group such as 22/10 or M05/M10."""
        parts = token.split("/")
        if len(parts) != 2:
            return None
        if not (_is_temperature_number(parts[0]) and _is_temperature_number(parts[1])):
            return None
        return _parse_temperature(parts[0])

    @staticmethod
    def _extract_altimeter(token: str) -> Optional[float]:
        """Altimeter setting in inHg from an A or Q group."""
        if len(token) != 5 or token[0] not in ("A", "Q"):
            return None
        number = token[1:]
        if not _DECIMAL_RE.fullmatch(number):
            return None
        value = float(number)
        if token[0] == "A":
            return value / 100.0
        return value * _HPA_TO_INHG


# --- Module-level helpers (pure functions) ---

def _parse_int(text: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def _parse_visibility_number(text: str) -> Optional[float]:
    """Plain decimal ("10", "1.5") or fraction ("1/2") with a non-zero denominator."""
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    parts = text.split("/")
    if len(parts) != 2:
        return None
    numerator, denominator = parts
    if not (_DECIMAL_RE.fullmatch(numerator) and _DECIMAL_RE.fullmatch(denominator)):
        return None
    if float(denominator) == 0:
        return None
    return float(numerator) / float(denominator)


def _is_temperature_number(text: str) -> bool:
    digits = text[1:] if text.startswith("M") else text
    return bool(_INTEGER_RE.fullmatch(digits)) and len(digits) <= 3


def _parse_temperature(text: str) -> float:
    if text.startswith("M"):
        return -float(text[1:])
    return float(text)
