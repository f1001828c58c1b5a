"""
Station directory loaded from tabular airport-codes text.

The directory is built once from a complete ingestion pass and is immutable
afterwards: a refreshed directory is a new value, never an in-place update.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from .navpoint import NavPoint
from .station import StationRecord

logger = logging.getLogger(__name__)

# Fixed column positions in the airport-codes layout
IDENT_FIELD = 8
NAME_FIELD = 2
COORDINATES_FIELD = 12

# Number of accepted rows echoed at DEBUG level while loading
_SAMPLE_ROWS_LOGGED = 3


class StationDirectory:
    """
    Ordered, immutable collection of StationRecord.

    Records keep source order and are never merged by identifier: if the
    source lists the same code twice, both entries survive.

    Example:
        directory = StationDirectory.from_file("airport-codes.csv")
        station = directory.nearest(NavPoint(40.64, -73.78))
        jfk = directory.by_ident("kjfk")
    """

    def __init__(self, records: Union[Tuple[StationRecord, ...], List[StationRecord]] = (),
                 rejected_count: int = 0):
        """
        Args:
            records: Station records in source order
            rejected_count: Number of source rows dropped during ingestion
        """
        self._records: Tuple[StationRecord, ...] = tuple(records)
        self._rejected_count = rejected_count

    # --- Loading ---

    @classmethod
    def load(cls, source_text: Optional[str],
             log: Optional[logging.Logger] = None) -> 'StationDirectory':
        """
        Parse airport-codes text into a directory.

        The first line is a header and is always skipped. Rows missing an
        identifier or a usable coordinate pair are dropped silently; only the
        aggregate count is kept in ``rejected_count``.

        Args:
            source_text: Full text of the station table, or None when unavailable
            log: Logger receiving load diagnostics (defaults to the module logger)

        Returns:
            StationDirectory, possibly empty
        """
        log = log or logger
        if not source_text:
            log.info("No station source text, directory is empty")
            return cls()

        records: List[StationRecord] = []
        rejected = 0

        for index, line in enumerate(source_text.splitlines()):
            if index == 0:
                continue

            record = cls._parse_row(split_csv_line(line))
            if record is None:
                rejected += 1
                continue

            records.append(record)
            if len(records) <= _SAMPLE_ROWS_LOGGED:
                log.debug("Parsed: %s (%s) at %s, %s",
                          record.name, record.ident, record.latitude, record.longitude)

        log.info("Loaded %d stations (%d rows rejected)", len(records), rejected)
        return cls(records, rejected_count=rejected)

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  log: Optional[logging.Logger] = None) -> 'StationDirectory':
        """
        Load a directory from a UTF-8 file.

        A missing or undecodable file yields an empty directory.
        """
        log = log or logger
        try:
            text = Path(path).read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Station source %s unavailable: %s", path, e)
            return cls()
        return cls.load(text, log=log)

    @classmethod
    def _parse_row(cls, columns: List[str]) -> Optional[StationRecord]:
        if len(columns) <= 1 or len(columns) <= COORDINATES_FIELD:
            return None

        ident = columns[IDENT_FIELD]
        if not ident:
            return None

        coordinates = parse_coordinates(columns[COORDINATES_FIELD])
        if coordinates is None:
            return None

        latitude, longitude = coordinates
        return StationRecord(
            ident=ident,
            name=columns[NAME_FIELD],
            latitude=latitude,
            longitude=longitude,
        )

    # --- Queries ---

    @property
    def rejected_count(self) -> int:
        """Number of source rows dropped while loading."""
        return self._rejected_count

    def nearest(self, position: Union[NavPoint, Tuple[float, float]]) -> Optional[StationRecord]:
        """Closest station to a position, or None if the directory is empty."""
        from nimbus_wx.locator import NearestStationLocator
        return NearestStationLocator.nearest(position, self)

    def by_ident(self, ident: str) -> Optional[StationRecord]:
        """
        Find a station by identifier.

        Input is trimmed and upper-cased, as typed on a manual search.
        Returns the first match in directory order.
        """
        code = (ident or "").strip().upper()
        if not code:
            return None
        return self.filter(lambda r: r.ident.upper() == code).first()

    def filter(self, predicate: Callable[[StationRecord], bool]) -> 'StationDirectory':
        return StationDirectory([r for r in self._records if predicate(r)])

    def first(self) -> Optional[StationRecord]:
        return self._records[0] if self._records else None

    def all(self) -> List[StationRecord]:
        return list(self._records)

    def to_dataframe(self) -> pd.DataFrame:
        """Records as a DataFrame with ident, name, latitude, longitude columns."""
        return pd.DataFrame(
            [r.to_dict() for r in self._records],
            columns=['ident', 'name', 'latitude', 'longitude'],
        )

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StationRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"StationDirectory({len(self._records)} stations)"


def split_csv_line(line: str) -> List[str]:
    """
    Split a line on commas outside double quotes.

    Quote characters toggle the quoted state and are dropped from the field
    contents; there is no escaping of embedded quotes.
    """
    fields = []
    current = []
    inside_quotes = False

    for char in line:
        if char == '"':
            inside_quotes = not inside_quotes
        elif char == ',' and not inside_quotes:
            fields.append(''.join(current))
            current = []
        else:
            current.append(char)
    fields.append(''.join(current))
    return fields


def parse_coordinates(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse an "A, B" coordinate pair into (latitude, longitude).

    Column order varies between releases of the airport-codes data, so the
    pair is read as (longitude, latitude) first, then as (latitude,
    longitude). The first reading within range wins.
    """
    parts = text.split(',')
    if len(parts) != 2:
        return None

    try:
        first = float(parts[0].strip())
        second = float(parts[1].strip())
    except ValueError:
        return None

    for latitude, longitude in ((second, first), (first, second)):
        if abs(latitude) <= 90 and abs(longitude) <= 180:
            return latitude, longitude
    return None
