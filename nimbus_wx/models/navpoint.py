#!/usr/bin/env python3

import math
from typing import Optional, Tuple, Union
from dataclasses import dataclass


@dataclass(frozen=True)
class NavPoint:
    """
    A geographic position with optional name.

    Coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Distances are in nautical miles, bearings in degrees true (0-360).
    """

    EARTH_RADIUS_NM = 3440.065

    latitude: float
    longitude: float
    name: Optional[str] = None

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    @classmethod
    def coerce(cls, position: Union['NavPoint', Tuple[float, float]]) -> 'NavPoint':
        """
        Accept either a NavPoint or a (latitude, longitude) pair.

        Args:
            position: NavPoint or (latitude, longitude) tuple

        Returns:
            A NavPoint for the position
        """
        if isinstance(position, NavPoint):
            return position
        latitude, longitude = position
        return cls(latitude=float(latitude), longitude=float(longitude))

    def haversine_distance(self, other: 'NavPoint') -> Tuple[float, float]:
        """
        Calculate the bearing and distance to another NavPoint using the Haversine formula.

        Args:
            other: The target NavPoint

        Returns:
            Tuple of (bearing in degrees, distance in nautical miles)
        """
        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        distance = self.EARTH_RADIUS_NM * c

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        bearing = (math.degrees(math.atan2(y, x)) + 360) % 360

        return bearing, distance

    def distance_to(self, other: 'NavPoint') -> float:
        """Great-circle distance to another point in nautical miles."""
        return self.haversine_distance(other)[1]

    def __str__(self) -> str:
        name_str = f"{self.name} " if self.name else ""
        return f"{name_str}({self.latitude}, {self.longitude})"
