"""Nearest-station lookup by great-circle distance."""

import logging
from typing import Iterable, Optional, Tuple, Union

from nimbus_wx.models.navpoint import NavPoint
from nimbus_wx.models.station import StationRecord

logger = logging.getLogger(__name__)


class NearestStationLocator:
    """
    Find the directory entry closest to a position.

    A linear scan over the directory: O(n) per query, which is fine for a few
    thousand stations queried on position updates. Ties go to the record seen
    first in directory order.

    Example:
        station = NearestStationLocator.nearest(NavPoint(51.47, -0.46), directory)
    """

    @staticmethod
    def nearest(
        position: Union[NavPoint, Tuple[float, float]],
        directory: Iterable[StationRecord],
    ) -> Optional[StationRecord]:
        """
        Args:
            position: Query position as NavPoint or (latitude, longitude)
            directory: StationDirectory or any iterable of StationRecord

        Returns:
            The closest StationRecord, or None if the directory is empty
        """
        result = NearestStationLocator.nearest_with_distance(position, directory)
        return result[0] if result is not None else None

    @staticmethod
    def nearest_with_distance(
        position: Union[NavPoint, Tuple[float, float]],
        directory: Iterable[StationRecord],
    ) -> Optional[Tuple[StationRecord, float]]:
        """
        Closest station together with its distance in nautical miles.

        Returns:
            (StationRecord, distance_nm) or None if the directory is empty
        """
        origin = NavPoint.coerce(position)

        best: Optional[StationRecord] = None
        best_distance = 0.0
        for record in directory:
            distance = origin.distance_to(record.location)
            # strict comparison keeps the first record on ties
            if best is None or distance < best_distance:
                best = record
                best_distance = distance

        if best is None:
            logger.debug("No station found near %s: directory is empty", origin)
            return None

        logger.debug("Nearest station to %s: %s (%.1f nm)", origin, best.ident, best_distance)
        return best, best_distance
