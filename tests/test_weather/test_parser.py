"""Tests for the decode entry point."""

import threading

import pytest

from nimbus_wx.weather import decode, WeatherParser, FlightCategory, UNLIMITED_CEILING_FT


class TestDecode:

    def test_wind(self):
        wx = decode("36010KT")
        assert wx.wind_direction == 360
        assert wx.wind_speed == 10

    def test_mixed_visibility(self):
        wx = decode("KJFK 211251Z 18008KT 1 1/2SM BR OVC015 12/11 A2990")
        assert wx.visibility_sm == 1.5
        assert wx.flight_category == FlightCategory.IFR

    def test_ceiling_minimum_classified(self):
        wx = decode("BKN020 OVC007")
        assert wx.ceiling_ft == 700
        assert wx.visibility_sm == 10.0
        assert wx.flight_category == FlightCategory.IFR

    def test_altimeter(self):
        assert decode("A2992").altimeter == pytest.approx(29.92)
        assert decode("Q1013").altimeter == pytest.approx(29.92, abs=0.01)

    def test_lifr(self):
        wx = decode("KSFO 211256Z 00000KT 1/4SM FG VV001 11/11 A2995")
        assert wx.visibility_sm == 0.25
        assert wx.flight_category == FlightCategory.LIFR

    def test_mvfr(self):
        wx = decode("EGLL 211250Z 27010KT 9999 SCT030 BKN025 15/08 Q1020")
        assert wx.ceiling_ft == 2500
        assert wx.flight_category == FlightCategory.MVFR

    def test_vfr(self):
        wx = decode("LFPG 211230Z 24015G25KT 9999 FEW040 18/09 Q1015")
        assert wx.ceiling_ft == UNLIMITED_CEILING_FT
        assert wx.flight_category == FlightCategory.VFR
        assert wx.temperature == 18.0

    @pytest.mark.parametrize("raw", ["", "   ", None, "NIL", "\n\n"])
    def test_degenerate_input_never_fails(self, raw):
        wx = decode(raw)
        assert wx.flight_category == FlightCategory.VFR
        assert wx.visibility_sm == 10.0

    def test_raw_text_verbatim(self):
        raw = "  KJFK 36010KT 10SM\n"
        assert decode(raw).raw_text == raw

    def test_idempotent(self):
        raw = "KJFK 211251Z 36010KT 1 1/2SM BR BKN009 OVC015 M01/M03 A2990"
        assert decode(raw) == decode(raw)
        assert decode(raw).to_dict() == decode(raw).to_dict()

    def test_class_method_matches_function(self):
        raw = "KJFK 36010KT 3SM OVC012"
        assert WeatherParser.parse_metar(raw) == decode(raw)

    def test_concurrent_decodes_are_independent(self):
        reports = {
            "KJFK 36010KT 1/2SM OVC002": FlightCategory.LIFR,
            "KBOS 18005KT 10SM FEW250": FlightCategory.VFR,
            "KORD 27012KT 2SM BKN008": FlightCategory.IFR,
        }
        results = {}

        def worker(raw):
            for _ in range(50):
                results.setdefault(raw, set()).add(decode(raw).flight_category)

        threads = [threading.Thread(target=worker, args=(raw,)) for raw in reports]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert {raw: cats.pop() for raw, cats in results.items()} == reports
        assert all(not cats for cats in results.values())
