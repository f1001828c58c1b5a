#!/usr/bin/env python3

import sys
import argparse
import logging
import json
from typing import List, Optional

from nimbus_wx import config
from nimbus_wx.briefing import WeatherBriefing, StationWeather
from nimbus_wx.exceptions import WeatherFetchError
from nimbus_wx.models.navpoint import NavPoint
from nimbus_wx.models.station import StationRecord
from nimbus_wx.models.station_directory import StationDirectory
from nimbus_wx.sources.avwx import AvWxSource
from nimbus_wx.weather.models import WeatherConditions
from nimbus_wx.weather.parser import decode

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for nimbus_wx."""

    def __init__(self, args, out=None):
        """
        Args:
            args: Parsed command line arguments
            out: Stream for results (defaults to stdout)
        """
        self.args = args
        self.out = out or sys.stdout
        self._directory: Optional[StationDirectory] = None

    @property
    def directory(self) -> StationDirectory:
        if self._directory is None:
            self._directory = StationDirectory.from_file(self.args.stations)
        return self._directory

    def run_decode(self) -> int:
        """Decode a METAR given on the command line."""
        raw = ' '.join(self.args.values)
        self._emit_conditions(decode(raw))
        return 0

    def run_nearest(self) -> int:
        """Nearest station to LAT LON."""
        position = self._position(self.args.values)
        station = self.directory.nearest(position)
        if station is None:
            logger.warning('No station found near %s', position)
            return 1
        self._emit_station(station)
        return 0

    def run_station(self) -> int:
        """Look up a station by identifier."""
        if len(self.args.values) != 1:
            raise SystemExit('station expects a single identifier')
        station = self.directory.by_ident(self.args.values[0])
        if station is None:
            logger.warning('Station %s not in directory', self.args.values[0])
            return 1
        self._emit_station(station)
        return 0

    def run_weather(self) -> int:
        """Fetch and decode current weather for IDENT or for the station nearest LAT LON."""
        with AvWxSource(timeout=self.args.timeout) as source:
            briefing = WeatherBriefing(self.directory, source)
            try:
                if len(self.args.values) == 1:
                    weather = briefing.conditions_for(self.args.values[0])
                else:
                    weather = briefing.conditions_near(self._position(self.args.values))
            except WeatherFetchError as e:
                logger.error('Error fetching weather: %s', e)
                return 2

        if weather is None:
            logger.warning('No station found nearby')
            return 1
        self._emit_weather(weather)
        return 0

    def run_stations(self) -> int:
        """Dump the station directory."""
        directory = self.directory
        if self.args.format == 'csv':
            directory.to_dataframe().to_csv(self.out, index=False)
        elif self.args.format == 'json':
            self._write(json.dumps([s.to_dict() for s in directory], indent=2))
        else:
            for station in directory:
                self._write(f'{station.ident:<8} {station.latitude:>10.4f} {station.longitude:>11.4f}  {station.name}')
            self._write(f'{len(directory)} stations ({directory.rejected_count} rows rejected)')
        return 0

    def run(self) -> int:
        """Run the specified command."""
        return getattr(self, f'run_{self.args.command}')()

    # --- Output ---

    def _emit_conditions(self, conditions: WeatherConditions):
        if self.args.format == 'json':
            self._write(json.dumps(conditions.to_dict(), indent=2))
            return
        wind_dir = f'{conditions.wind_direction:03d}' if conditions.wind_direction is not None else 'VRB'
        ceiling = f'{conditions.ceiling_ft} ft' if conditions.has_ceiling else 'unlimited'
        self._write(f'Category:    {conditions.flight_category.value}')
        self._write(f'Wind:        {wind_dir} at {conditions.wind_speed} kt')
        self._write(f'Visibility:  {conditions.visibility_sm:g} SM')
        self._write(f'Ceiling:     {ceiling}')
        self._write(f'Temperature: {conditions.temperature:g} C')
        self._write(f'Altimeter:   {conditions.altimeter:.2f} inHg')

    def _emit_station(self, station: StationRecord):
        if self.args.format == 'json':
            self._write(json.dumps(station.to_dict(), indent=2))
        else:
            self._write(f'{station.ident} {station.name} ({station.latitude}, {station.longitude})')

    def _emit_weather(self, weather: StationWeather):
        if self.args.format == 'json':
            self._write(json.dumps(weather.to_dict(), indent=2))
            return
        header = f'{weather.ident} {weather.name}'
        if weather.distance_nm is not None:
            header += f' ({weather.distance_nm:.1f} nm)'
        self._write(header)
        self._write(weather.conditions.raw_text)
        self._emit_conditions(weather.conditions)

    def _write(self, text: str):
        print(text, file=self.out)

    @staticmethod
    def _position(values: List[str]) -> NavPoint:
        if len(values) != 2:
            raise SystemExit('expected LAT LON')
        try:
            return NavPoint(latitude=float(values[0]), longitude=float(values[1]))
        except ValueError as e:
            raise SystemExit(f'invalid position: {e}')


def main(argv: Optional[List[str]] = None, out=None) -> int:
    parser = argparse.ArgumentParser(description='Nearest station weather and METAR decoding tool')
    parser.add_argument('command', help='Command to execute', choices=['decode', 'nearest', 'station', 'weather', 'stations'])
    parser.add_argument('values', help='METAR text, LAT LON or station identifier depending on command', nargs='*')
    parser.add_argument('-s', '--stations', help='Station table in airport-codes CSV layout', default=config.STATIONS_CSV)
    parser.add_argument('-t', '--timeout', help='HTTP timeout in seconds', type=float, default=config.AVWX_TIMEOUT)
    parser.add_argument('--format', help='Output format (json,csv,human); csv only for stations', choices=['json', 'csv', 'human'], default='human')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)
    if args.format == 'csv' and args.command != 'stations':
        parser.error('--format csv is only supported by the stations command')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args, out=out)
    return cmd.run()


if __name__ == '__main__':
    sys.exit(main())
