"""Tests for VTG sentence decoding."""

import pytest

from navstream.nmea.fields import FormatError
from navstream.nmea.framer import tokenize
from navstream.nmea.types import VTGData
from navstream.nmea.vtg import decode_vtg

HEADERS = frozenset({"$GPVTG"})


def _decode(text: str) -> tuple[bool, VTGData]:
    record = VTGData()
    return decode_vtg(tokenize(text), record, HEADERS), record


class TestDecodeVTG:
    """Tests for decode_vtg function."""

    def test_valid_vtg_without_mode(self):
        found, record = _decode("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48\r\n")
        assert found is True
        assert record.type == "$GPVTG"
        assert record.track_true == pytest.approx(54.7)
        assert record.track_magnetic == pytest.approx(34.4)
        assert record.speed_knots == pytest.approx(5.5)
        assert record.speed_kilometers_per_hour == pytest.approx(10.2)
        assert record.speed_meters_per_second == pytest.approx(10.2 / 3.6)
        assert record.mode == " "
        assert record.checksum == "*48"

    def test_vtg_autonomous_mode(self):
        found, record = _decode("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25\r\n")
        assert found is True
        assert record.mode == "A"
        assert record.checksum == "*25"

    def test_vtg_differential_mode(self):
        _, record = _decode("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*20\r\n")
        assert record.mode == "D"

    def test_vtg_stationary_empty_track(self):
        found, record = _decode("$GPVTG,,T,,M,0.0,N,0.0,K,A*23\r\n")
        assert found is True
        assert record.track_true == 0.0
        assert record.track_magnetic == 0.0
        assert record.speed_knots == 0.0
        assert record.speed_meters_per_second == 0.0
        assert record.mode == "A"

    def test_without_line_terminator(self):
        found, record = _decode("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        assert found is True
        assert record.checksum == "*48"

    def test_vtg_malformed_too_few_fields(self):
        found, record = _decode("$GPVTG,054.7,T")
        assert found is False
        assert record == VTGData()

    def test_vtg_wrong_sentence_type(self):
        found, _ = _decode("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n")
        assert found is False

    def test_malformed_speed_raises(self):
        with pytest.raises(FormatError):
            _decode("$GPVTG,054.7,T,034.4,M,005.5,N,1O.2,K*48\r\n")
