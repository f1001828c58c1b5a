"""Exceptions raised by nimbus_wx.

Decoding and station lookup never raise for malformed data; only the
network boundary reports failures.
"""


class NimbusError(Exception):
    """Base class for nimbus_wx errors."""


class WeatherFetchError(NimbusError):
    """Raw report text could not be retrieved for a station."""

    def __init__(self, station: str, message: str):
        super().__init__(f"{station}: {message}")
        self.station = station


class StationNotReporting(WeatherFetchError):
    """The weather service returned no report for the station."""

    def __init__(self, station: str):
        super().__init__(station, "no report available")
