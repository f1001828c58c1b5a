"""Tests for station directory ingestion."""

import logging

import pytest

from nimbus_wx.models.station import StationRecord
from nimbus_wx.models.station_directory import (
    StationDirectory,
    split_csv_line,
    parse_coordinates,
)

HEADER = "ident,type,name,elevation_ft,continent,iso_country,iso_region,municipality,icao_code,iata_code,gps_code,local_code,coordinates"


def row(ident="KJFK", name="John F Kennedy", coordinates='"-73.7789, 40.6398"'):
    return f'X,large_airport,{name},13,NA,US,US-NY,City,{ident},JFK,{ident},,{coordinates}'


class TestSplitCsvLine:

    def test_plain_fields(self):
        assert split_csv_line("a,b,c") == ["a", "b", "c"]

    def test_quoted_comma_stays_in_field(self):
        assert split_csv_line('a,"b, c",d') == ["a", "b, c", "d"]

    def test_quotes_are_stripped(self):
        assert split_csv_line('"a","b"') == ["a", "b"]

    def test_empty_fields_kept(self):
        assert split_csv_line("a,,c,") == ["a", "", "c", ""]

    def test_empty_line(self):
        assert split_csv_line("") == [""]


class TestParseCoordinates:

    def test_longitude_first(self):
        assert parse_coordinates("-73.7789, 40.6398") == (40.6398, -73.7789)

    def test_falls_back_to_latitude_first(self):
        """A second value beyond 90 can only be a longitude."""
        assert parse_coordinates("35.5523, 139.78") == (35.5523, 139.78)

    def test_both_orderings_out_of_range(self):
        assert parse_coordinates("200.0, 100.0") is None

    def test_non_numeric(self):
        assert parse_coordinates("abc, 1.0") is None

    def test_wrong_part_count(self):
        assert parse_coordinates("1.0") is None
        assert parse_coordinates("1.0, 2.0, 3.0") is None

    def test_boundaries_are_inclusive(self):
        assert parse_coordinates("180, 90") == (90.0, 180.0)
        assert parse_coordinates("-180, -90") == (-90.0, -180.0)

    def test_nan_rejected(self):
        assert parse_coordinates("nan, nan") is None


class TestLoad:

    def test_sample_file(self, directory):
        assert [s.ident for s in directory] == ["KJFK", "EGLL", "RJTT", "LFPG", "KJFK"]
        assert directory.rejected_count == 4

    def test_fields_mapped_by_position(self, directory):
        jfk = directory[0]
        assert jfk.ident == "KJFK"
        assert jfk.name == "John F Kennedy International Airport"
        assert jfk.latitude == pytest.approx(40.639801)
        assert jfk.longitude == pytest.approx(-73.7789)

    def test_quoted_name_with_comma(self, directory):
        assert directory[3].name == "Paris, Charles de Gaulle"

    def test_latitude_first_row(self, directory):
        haneda = directory[2]
        assert haneda.latitude == pytest.approx(35.552299)
        assert haneda.longitude == pytest.approx(139.779999)

    def test_duplicates_survive(self, directory):
        jfks = directory.filter(lambda s: s.ident == "KJFK").all()
        assert len(jfks) == 2
        assert jfks[1].name == "JFK Duplicate Entry"

    def test_header_always_skipped(self):
        text = "\n".join([row("HDR0"), row("KJFK")])
        directory = StationDirectory.load(text)
        assert [s.ident for s in directory] == ["KJFK"]

    def test_empty_identifier_rejected(self):
        directory = StationDirectory.load("\n".join([HEADER, row("")]))
        assert len(directory) == 0
        assert directory.rejected_count == 1

    def test_short_row_rejected(self):
        directory = StationDirectory.load("\n".join([HEADER, "KJFK", "a,b,c"]))
        assert len(directory) == 0
        assert directory.rejected_count == 2

    def test_empty_name_allowed(self):
        directory = StationDirectory.load("\n".join([HEADER, row(name="")]))
        assert directory[0].name == ""

    def test_crlf_line_endings(self):
        text = "\r\n".join([HEADER, row("KJFK"), row("KLGA")]) + "\r\n"
        directory = StationDirectory.load(text)
        assert [s.ident for s in directory] == ["KJFK", "KLGA"]

    @pytest.mark.parametrize("source", [None, "", HEADER])
    def test_no_rows_is_empty_directory(self, source):
        directory = StationDirectory.load(source)
        assert len(directory) == 0
        assert not directory

    def test_missing_file_is_empty_directory(self, tmp_path):
        directory = StationDirectory.from_file(tmp_path / "missing.csv")
        assert len(directory) == 0

    def test_undecodable_file_is_empty_directory(self, tmp_path, caplog):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"header\nKJFK,,Caf\xe9,,,,,,KJFK,,,,\"-73.7, 40.6\"\n")
        with caplog.at_level(logging.WARNING):
            directory = StationDirectory.from_file(path)
        assert len(directory) == 0
        assert any("unavailable" in r.getMessage() for r in caplog.records)

    def test_from_file_strips_bom(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text("\n".join([HEADER, row("KJFK")]), encoding="utf-8-sig")
        assert StationDirectory.from_file(path)[0].ident == "KJFK"

    def test_injected_logger_receives_summary(self, caplog):
        log = logging.getLogger("test.station_load")
        with caplog.at_level(logging.INFO, logger="test.station_load"):
            StationDirectory.load("\n".join([HEADER, row("KJFK"), row("")]), log=log)
        assert any("Loaded 1 stations (1 rows rejected)" in r.getMessage() for r in caplog.records)


class TestQueries:

    def test_by_ident_normalises_input(self, directory):
        assert directory.by_ident(" egll ").name == "London Heathrow Airport"

    def test_by_ident_returns_first_duplicate(self, directory):
        assert directory.by_ident("KJFK").name == "John F Kennedy International Airport"

    def test_by_ident_unknown(self, directory):
        assert directory.by_ident("ZZZZ") is None
        assert directory.by_ident("") is None

    def test_nearest_delegates_to_locator(self, directory):
        assert directory.nearest((51.5, -0.4)).ident == "EGLL"

    def test_records_are_immutable(self, directory):
        with pytest.raises(AttributeError):
            directory[0].ident = "XXXX"
        with pytest.raises(TypeError):
            directory[0] = directory[1]

    def test_all_returns_copy(self, directory):
        records = directory.all()
        records.clear()
        assert len(directory) == 5

    def test_to_dataframe(self, directory):
        df = directory.to_dataframe()
        assert list(df.columns) == ['ident', 'name', 'latitude', 'longitude']
        assert len(df) == 5
        assert df.iloc[1]['ident'] == 'EGLL'

    def test_empty_to_dataframe(self):
        df = StationDirectory().to_dataframe()
        assert len(df) == 0
        assert list(df.columns) == ['ident', 'name', 'latitude', 'longitude']


class TestStationRecord:

    def test_location(self):
        record = StationRecord("KJFK", "JFK", 40.64, -73.78)
        assert record.location.latitude == 40.64
        assert record.location.name == "KJFK"

    def test_empty_ident_rejected(self):
        with pytest.raises(ValueError):
            StationRecord("", "x", 0.0, 0.0)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            StationRecord("KJFK", "x", 95.0, 0.0)
