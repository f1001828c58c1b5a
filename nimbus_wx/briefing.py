"""
Weather briefing pipeline.

Position fix -> nearest station -> fetch -> decode -> classified conditions.
"""

import logging
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from nimbus_wx import config
from nimbus_wx.locator import NearestStationLocator
from nimbus_wx.models.navpoint import NavPoint
from nimbus_wx.models.station import StationRecord
from nimbus_wx.models.station_directory import StationDirectory
from nimbus_wx.sources.avwx import AvWxSource
from nimbus_wx.weather.models import WeatherConditions

logger = logging.getLogger(__name__)

Position = Union[NavPoint, Tuple[float, float]]


@dataclass(frozen=True)
class StationWeather:
    """
    Conditions decoded for a station.

    Attributes:
        ident: Station identifier the report was fetched for
        name: Station display name ("Manual Entry" for codes not in the directory)
        conditions: Decoded, classified conditions
        station: Directory record, None for manual codes not in the directory
        distance_nm: Distance from the query position, when looked up by position
    """

    ident: str
    name: str
    conditions: WeatherConditions
    station: Optional[StationRecord] = None
    distance_nm: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            'ident': self.ident,
            'name': self.name,
            'station': self.station.to_dict() if self.station else None,
            'distance_nm': self.distance_nm,
            'conditions': self.conditions.to_dict(),
        }


class WeatherBriefing:
    """
    Ties the station directory to the weather source.

    The briefing holds a reference to an immutable StationDirectory. A
    refreshed directory replaces the old one as a whole through
    replace_directory(); the directory is never edited in place.

    Example:
        briefing = WeatherBriefing(StationDirectory.from_file("airport-codes.csv"))
        weather = briefing.conditions_near(NavPoint(40.64, -73.78))
        if weather:
            print(weather.ident, weather.conditions.flight_category.value)
    """

    def __init__(self, directory: StationDirectory, source: Optional[AvWxSource] = None):
        self._directory = directory
        self._owns_source = source is None
        self._source = source or AvWxSource()

    @property
    def directory(self) -> StationDirectory:
        return self._directory

    def replace_directory(self, directory: StationDirectory) -> None:
        """Swap in a newly loaded directory."""
        logger.info("Replacing station directory (%d -> %d stations)",
                    len(self._directory), len(directory))
        self._directory = directory

    def nearest_station(self, position: Position) -> Optional[StationRecord]:
        return NearestStationLocator.nearest(position, self._directory)

    def station(self, ident: str) -> Optional[StationRecord]:
        """Directory record for a typed station code, if known."""
        return self._directory.by_ident(ident)

    def conditions_near(self, position: Position) -> Optional[StationWeather]:
        """
        Fetch and decode the weather at the station nearest to a position.

        Returns:
            StationWeather, or None when the directory is empty

        Raises:
            WeatherFetchError: the report could not be retrieved
        """
        directory = self._directory
        found = NearestStationLocator.nearest_with_distance(position, directory)
        if found is None:
            logger.info("No station found nearby")
            return None

        record, distance = found
        logger.info("Nearest: %s (%s) at %.1f nm", record.ident, record.name, distance)
        conditions = self._source.fetch_conditions(record.ident)
        return StationWeather(
            ident=record.ident,
            name=record.name,
            conditions=conditions,
            station=record,
            distance_nm=distance,
        )

    def conditions_for(self, ident: str) -> StationWeather:
        """
        Fetch and decode the weather for a station code typed by hand.

        The code does not have to be in the directory.

        Raises:
            ValueError: ident is blank
            WeatherFetchError: the report could not be retrieved
        """
        code = (ident or "").strip().upper()
        if not code:
            raise ValueError("Station identifier must not be empty")

        record = self._directory.by_ident(code)
        conditions = self._source.fetch_conditions(code)
        return StationWeather(
            ident=record.ident if record else code,
            name=record.name if record else config.MANUAL_ENTRY_NAME,
            conditions=conditions,
            station=record,
        )

    def conditions_near_async(self, position: Position) -> 'Future[Optional[StationWeather]]':
        """Run conditions_near on the source's executor."""
        return self._source.submit(self.conditions_near, position)

    def conditions_for_async(self, ident: str) -> 'Future[StationWeather]':
        """Run conditions_for on the source's executor."""
        return self._source.submit(self.conditions_for, ident)

    def close(self) -> None:
        """Close the weather source if the briefing created it."""
        if self._owns_source:
            self._source.close()

    def __enter__(self) -> 'WeatherBriefing':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
