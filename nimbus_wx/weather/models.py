"""Weather report data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Ceiling value meaning no broken/overcast layer was reported
UNLIMITED_CEILING_FT = 100000

DEFAULT_VISIBILITY_SM = 10.0
DEFAULT_TEMPERATURE_C = 0.0
DEFAULT_ALTIMETER_INHG = 29.92


class FlightCategory(Enum):
    """
    FAA flight category based on ceiling and visibility.

    Ordered from worst to best: LIFR < IFR < MVFR < VFR.
    """

    LIFR = "LIFR"
    IFR = "IFR"
    MVFR = "MVFR"
    VFR = "VFR"

    @property
    def order(self) -> int:
        """Numeric ordering from worst (0) to best (3)."""
        return _CATEGORY_ORDER[self]

    def __lt__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'FlightCategory') -> bool:
        if not isinstance(other, FlightCategory):
            return NotImplemented
        return self.order >= other.order


_CATEGORY_ORDER = {
    FlightCategory.LIFR: 0,
    FlightCategory.IFR: 1,
    FlightCategory.MVFR: 2,
    FlightCategory.VFR: 3,
}


@dataclass(frozen=True)
class WeatherConditions:
    """
    Decoded METAR conditions.

    Fields that were not found in the report keep their defaults, so every
    decode yields a complete value.

    Attributes:
        raw_text: Report text exactly as received
        wind_direction: Wind direction in degrees (None if variable or not reported)
        wind_speed: Wind speed in knots
        visibility_sm: Visibility in statute miles
        temperature: Temperature in Celsius
        altimeter: Altimeter setting in inches of mercury
        ceiling_ft: Lowest broken/overcast layer in feet (100000 when unlimited)
        flight_category: Category computed from ceiling and visibility
    """

    raw_text: str = ""
    wind_direction: Optional[int] = None
    wind_speed: int = 0
    visibility_sm: float = DEFAULT_VISIBILITY_SM
    temperature: float = DEFAULT_TEMPERATURE_C
    altimeter: float = DEFAULT_ALTIMETER_INHG
    ceiling_ft: int = UNLIMITED_CEILING_FT
    flight_category: FlightCategory = FlightCategory.VFR

    @property
    def has_ceiling(self) -> bool:
        """True when a broken, overcast or vertical visibility layer was reported."""
        return self.ceiling_ft < UNLIMITED_CEILING_FT

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'raw_text': self.raw_text,
            'wind_direction': self.wind_direction,
            'wind_speed': self.wind_speed,
            'visibility_sm': self.visibility_sm,
            'temperature': self.temperature,
            'altimeter': self.altimeter,
            'ceiling_ft': self.ceiling_ft,
            'flight_category': self.flight_category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'WeatherConditions':
        """Create WeatherConditions from dictionary."""
        flight_category = FlightCategory.VFR
        if data.get('flight_category'):
            try:
                flight_category = FlightCategory(data['flight_category'])
            except ValueError:
                pass

        return cls(
            raw_text=data.get('raw_text', ''),
            wind_direction=data.get('wind_direction'),
            wind_speed=data.get('wind_speed', 0),
            visibility_sm=data.get('visibility_sm', DEFAULT_VISIBILITY_SM),
            temperature=data.get('temperature', DEFAULT_TEMPERATURE_C),
            altimeter=data.get('altimeter', DEFAULT_ALTIMETER_INHG),
            ceiling_ft=data.get('ceiling_ft', UNLIMITED_CEILING_FT),
            flight_category=flight_category,
        )

    def __repr__(self) -> str:
        return f"WeatherConditions({self.flight_category.value} {self.raw_text.strip()[:40]!r})"
