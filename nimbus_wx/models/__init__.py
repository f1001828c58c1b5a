"""
Data models for the nimbus_wx library.

This package contains the geographic and station models: positions,
station records and the immutable station directory.
"""

from .navpoint import NavPoint
from .station import StationRecord
from .station_directory import StationDirectory

__all__ = [
    'NavPoint',
    'StationRecord',
    'StationDirectory',
]
