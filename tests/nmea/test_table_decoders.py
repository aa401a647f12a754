"""Tests for the table-driven GGA, VTG and RMC decoders."""

import pytest

from gnss_decoder.nmea import split_sentence
from gnss_decoder.nmea.gga import GGA_FIELDS, decode_gga
from gnss_decoder.nmea.rmc import RMC_FIELDS, decode_rmc
from gnss_decoder.nmea.vtg import VTG_FIELDS, decode_vtg

GGA = "$GPGGA,085120.307,3541.1493,N,13945.3994,E,1,08,1.0,6.9,M,35.9,M,,0000*5E"
VTG = "$GPVTG,240.3,T,,M,000.0,N,000.0,K,A*08"
RMC = "$GPRMC,085120.307,A,3541.1493,N,13945.3994,E,000.0,240.3,181211,,,A*6A"


class TestDecodeGGA:
    def test_fixture_values(self):
        result = decode_gga(split_sentence(GGA))
        assert result["utc"] == pytest.approx(85120.307)
        assert result["lat_raw"] == pytest.approx(3541.1493)
        assert result["ns"] == "N"
        assert result["lng_raw"] == pytest.approx(13945.3994)
        assert result["ew"] == "E"
        assert result["sat_cnt"] == 8
        assert result["hdr"] == pytest.approx(1.0)

    def test_produces_exactly_table_keys(self):
        result = decode_gga(split_sentence(GGA))
        assert set(result) == {d.key for d in GGA_FIELDS}

    def test_no_fix_empty_fields_default_to_zero(self):
        result = decode_gga(split_sentence("$GNGGA,123519.00,,,,,0,00,,,,,,,*5B"))
        assert result["lat_raw"] == 0.0
        assert result["ns"] == ""
        assert result["lng_raw"] == 0.0
        assert result["ew"] == ""
        assert result["sat_cnt"] == 0
        assert result["hdr"] == 0.0

    def test_truncated_sentence_does_not_raise(self):
        result = decode_gga(split_sentence("$GPGGA,085120.307,3541.1493"))
        assert result["utc"] == pytest.approx(85120.307)
        assert result["lat_raw"] == pytest.approx(3541.1493)
        assert result["ns"] == ""
        assert result["hdr"] == 0.0

    def test_southern_western_hemisphere_letters_kept_raw(self):
        sentence = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65"
        result = decode_gga(split_sentence(sentence))
        assert result["ns"] == "S"
        assert result["ew"] == "W"
        assert result["sat_cnt"] == 10


class TestDecodeVTG:
    def test_fixture_values(self):
        result = decode_vtg(split_sentence(VTG))
        assert result == {
            "ttmg": pytest.approx(240.3),
            "mtmg": 0.0,
            "gsk": 0.0,
            "gskph": 0.0,
        }

    def test_moving(self):
        result = decode_vtg(split_sentence("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"))
        assert result["ttmg"] == pytest.approx(54.7)
        assert result["mtmg"] == pytest.approx(34.4)
        assert result["gsk"] == pytest.approx(5.5)
        assert result["gskph"] == pytest.approx(10.2)

    def test_produces_exactly_table_keys(self):
        result = decode_vtg(split_sentence("$GNVTG,,T,,M,,N,,K,N*32"))
        assert set(result) == {d.key for d in VTG_FIELDS}


class TestDecodeRMC:
    def test_fixture_values(self):
        result = decode_rmc(split_sentence(RMC))
        assert result["utc"] == pytest.approx(85120.307)
        assert result["status"] == "A"
        assert result["lat_raw"] == pytest.approx(3541.1493)
        assert result["ns"] == "N"
        assert result["lng_raw"] == pytest.approx(13945.3994)
        assert result["ew"] == "E"
        assert result["gsk"] == 0.0
        assert result["ttmg"] == pytest.approx(240.3)
        assert result["date"] == 181211

    def test_produces_exactly_table_keys(self):
        result = decode_rmc(split_sentence(RMC))
        assert set(result) == {d.key for d in RMC_FIELDS}

    def test_void_status(self):
        result = decode_rmc(split_sentence("$GPRMC,085120.307,V,,,,,,,181211,,,N*00"))
        assert result["status"] == "V"
        assert result["lat_raw"] == 0.0
        assert result["date"] == 181211
