"""Tests for the GSA, GSV and ZDA decoders."""

import pytest

from gnss_decoder.nmea import Satellite, split_sentence
from gnss_decoder.nmea.gsa import decode_gsa
from gnss_decoder.nmea.gsv import decode_gsv
from gnss_decoder.nmea.zda import decode_zda

GSA = "$GPGSA,A,3,29,26,05,10,02,27,08,15,,,,,1.8,1.0,1.5*3E"
GSV = "$GPGSV,3,1,12,26,72,352,28,05,65,066,37,15,50,268,35,27,33,189,37*7F"
ZDA = "$GPZDA,085120.307,13,06,2019,09,00*10"


class TestDecodeGSA:
    def test_fixture_values(self):
        result = decode_gsa(split_sentence(GSA))
        assert result == {"mode": "A", "sat_ids": [29, 26, 5, 10, 2, 27, 8, 15]}

    def test_gaps_between_slots_are_removed_in_order(self):
        result = decode_gsa(split_sentence("$GPGSA,M,3,,07,,,19,,,,,,,03,2.0,1.1,1.6*00"))
        assert result["mode"] == "M"
        assert result["sat_ids"] == [7, 19, 3]

    def test_no_satellites(self):
        result = decode_gsa(split_sentence("$GPGSA,A,1,,,,,,,,,,,,,,,*1E"))
        assert result["sat_ids"] == []

    def test_truncated_sentence(self):
        result = decode_gsa(split_sentence("$GPGSA,A,3,29"))
        assert result == {"mode": "A", "sat_ids": [29]}


class TestDecodeGSV:
    def test_first_message_carries_four_satellites(self):
        satellites = decode_gsv(split_sentence(GSV))["sat"]
        assert satellites == [
            Satellite(id=26, elevation=72, azimuth=352, snr=28),
            Satellite(id=5, elevation=65, azimuth=66, snr=37),
            Satellite(id=15, elevation=50, azimuth=268, snr=35),
            Satellite(id=27, elevation=33, azimuth=189, snr=37),
        ]

    def test_last_message_carries_remainder(self):
        sentence = "$GPGSV,3,3,10,12,10,045,20,31,05,310,*7A"
        satellites = decode_gsv(split_sentence(sentence))["sat"]
        assert len(satellites) == 2
        assert satellites[0] == Satellite(id=12, elevation=10, azimuth=45, snr=20)
        # Untracked satellite: empty SNR reads as 0
        assert satellites[1] == Satellite(id=31, elevation=5, azimuth=310, snr=0)

    def test_single_message(self):
        sentence = "$GPGSV,1,1,01,10,45,180,40*4B"
        satellites = decode_gsv(split_sentence(sentence))["sat"]
        assert satellites == [Satellite(id=10, elevation=45, azimuth=180, snr=40)]

    def test_no_satellites_in_view(self):
        assert decode_gsv(split_sentence("$GPGSV,1,1,00*79"))["sat"] == []

    @pytest.mark.parametrize(
        "sentence",
        [
            "$GPGSV,1,1,99,10,45,180,40*4B",  # total larger than one line can hold
            "$GPGSV,1,3,01,10,45,180,40*4B",  # index past the last message
            "$GPGSV,,,,*00",
        ],
    )
    def test_garbled_counts_stay_within_one_sentence(self, sentence):
        satellites = decode_gsv(split_sentence(sentence))["sat"]
        assert 0 <= len(satellites) <= 4

    def test_truncated_group_reads_zeros(self):
        satellites = decode_gsv(split_sentence("$GPGSV,1,1,02,10,45"))["sat"]
        assert satellites == [
            Satellite(id=10, elevation=45, azimuth=0, snr=0),
            Satellite(id=0, elevation=0, azimuth=0, snr=0),
        ]


class TestDecodeZDA:
    def test_fixture_values(self):
        result = decode_zda(split_sentence(ZDA))
        assert result["utc"] == pytest.approx(85120.307)
        assert result["day"] == 13
        assert result["month"] == 6
        assert result["year"] == 2019
        assert result["tzone_h"] == 9
        assert result["tzone_m"] == 0

    def test_empty_fields_are_omitted(self):
        result = decode_zda(split_sentence("$GPZDA,085120.307,,,,,*4A"))
        assert set(result) == {"utc"}

    def test_missing_trailing_fields_are_omitted(self):
        result = decode_zda(split_sentence("$GPZDA,,13,06"))
        assert result == {"day": 13, "month": 6}

    def test_negative_zone(self):
        result = decode_zda(split_sentence("$GPZDA,201530.00,04,07,2002,-05,00*6E"))
        assert result["tzone_h"] == -5
