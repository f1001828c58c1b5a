from dataclasses import dataclass
from typing import Dict, Any

from .navpoint import NavPoint


@dataclass(frozen=True)
class StationRecord:
    """
    A weather-reporting station from the station directory.

    Attributes:
        ident: Station identifier (e.g. "KJFK"), never empty
        name: Display name, may be empty
        latitude: Decimal degrees, -90 to +90
        longitude: Decimal degrees, -180 to +180
    """

    ident: str
    name: str
    latitude: float
    longitude: float

    def __post_init__(self):
        if not self.ident:
            raise ValueError("Station identifier must not be empty")
        if abs(self.latitude) > 90 or abs(self.longitude) > 180:
            raise ValueError(
                f"Invalid coordinates for {self.ident}: ({self.latitude}, {self.longitude})"
            )

    @property
    def location(self) -> NavPoint:
        return NavPoint(latitude=self.latitude, longitude=self.longitude, name=self.ident)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ident': self.ident,
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }

    def __repr__(self) -> str:
        return f"StationRecord({self.ident} {self.name!r} {self.latitude}, {self.longitude})"
