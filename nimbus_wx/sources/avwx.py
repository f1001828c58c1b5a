"""Aviation Weather (aviationweather.gov) API source for live METAR data."""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

import requests

from nimbus_wx import config
from nimbus_wx.exceptions import WeatherFetchError, StationNotReporting
from nimbus_wx.weather.models import WeatherConditions
from nimbus_wx.weather.parser import WeatherParser

logger = logging.getLogger(__name__)


class AvWxSource:
    """
    Fetch the current METAR for a station from the aviationweather.gov API.

    The synchronous methods block on the network; the ``*_async`` variants
    run the fetch on a thread pool and return a Future. Decoding only starts
    once the raw text is available. No retries are attempted.

    Example:
        source = AvWxSource()
        raw = source.fetch_raw_metar("KJFK")
        conditions = source.fetch_conditions("KJFK")
        future = source.fetch_conditions_async("EGLL")
        print(future.result().flight_category)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            base_url: API root, defaults to configuration.
            executor: Executor for the async helpers; a private thread pool is
                created on first use when omitted.
        """
        self._session = session or requests.Session()
        self._timeout = timeout if timeout is not None else config.AVWX_TIMEOUT
        self._base_url = (base_url or config.AVWX_BASE_URL).rstrip("/")
        self._executor = executor
        self._owns_executor = executor is None
        self._session.headers.setdefault("User-Agent", config.USER_AGENT)

    def fetch_raw_metar(self, station: str) -> str:
        """
        Fetch the latest raw METAR line for a station.

        Args:
            station: Station identifier, e.g. "KJFK"

        Returns:
            The first non-empty line of the response

        Raises:
            ValueError: station is blank
            StationNotReporting: the service has no report for the station
            WeatherFetchError: the request failed
        """
        code = (station or "").strip().upper()
        if not code:
            raise ValueError("Station identifier must not be empty")

        url = f"{self._base_url}/metar"
        logger.info("Fetching weather for %s", code)
        try:
            response = self._session.get(
                url,
                params={"ids": code, "format": "raw"},
                timeout=self._timeout,
            )
            if response.status_code == 204:
                raise StationNotReporting(code)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("AvWx fetch failed for %s: %s", code, e)
            raise WeatherFetchError(code, str(e)) from e

        for line in response.text.splitlines():
            if line.strip():
                return line.strip()
        raise StationNotReporting(code)

    def fetch_conditions(self, station: str) -> WeatherConditions:
        """Fetch and decode the latest METAR for a station."""
        return WeatherParser.parse_metar(self.fetch_raw_metar(station))

    def fetch_raw_metar_async(self, station: str) -> 'Future[str]':
        """Run fetch_raw_metar on the executor."""
        return self.submit(self.fetch_raw_metar, station)

    def fetch_conditions_async(self, station: str) -> 'Future[WeatherConditions]':
        """Run fetch_conditions on the executor."""
        return self.submit(self.fetch_conditions, station)

    def close(self) -> None:
        """Shut down the private thread pool, if one was created."""
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def submit(self, fn, *args) -> Future:
        """Run a callable on the fetch executor."""
        return self._get_executor().submit(fn, *args)

    def _get_executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=config.MAX_FETCH_WORKERS,
                thread_name_prefix="avwx",
            )
        return self._executor

    def __enter__(self) -> 'AvWxSource':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
