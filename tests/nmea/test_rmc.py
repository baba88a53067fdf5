"""Tests for RMC sentence decoding."""

import pytest

from navstream.nmea.fields import FormatError
from navstream.nmea.framer import tokenize
from navstream.nmea.rmc import decode_rmc
from navstream.nmea.types import RMCData

HEADERS = frozenset({"$GPRMC"})

RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\r\n"
RMC_WITH_MODE = "$GPRMC,092751.000,A,5321.6802,S,00630.3371,W,0.06,31.66,280511,,,D*45\r\n"


def _decode(text: str, record: RMCData | None = None) -> tuple[bool, RMCData]:
    record = record if record is not None else RMCData()
    return decode_rmc(tokenize(text), record, HEADERS), record


class TestDecodeRMC:
    """Tests for decode_rmc function."""

    def test_valid_rmc(self):
        found, record = _decode(RMC)
        assert found is True
        assert record.type == "$GPRMC"
        assert record.time == "123519"
        assert record.status == "A"
        assert record.latitude == pytest.approx(48.1173)
        assert record.longitude == pytest.approx(11.5166667)
        assert record.speed_knots == pytest.approx(22.4)
        assert record.course == pytest.approx(84.4)
        assert record.date == 230394
        assert record.magnetic_variation == pytest.approx(-3.1)
        assert record.mode == " "
        assert record.checksum == "*6A"

    def test_without_line_terminator(self):
        found, record = _decode(RMC.rstrip())
        assert found is True
        assert record.checksum == "*6A"

    def test_nmea_23_mode_indicator(self):
        found, record = _decode(RMC_WITH_MODE)
        assert found is True
        assert record.latitude == pytest.approx(-(53 + 21.6802 / 60))
        assert record.longitude == pytest.approx(-(6 + 30.3371 / 60))
        assert record.magnetic_variation == 0.0
        assert record.mode == "D"
        assert record.checksum == "*45"

    def test_void_status_with_empty_fields(self):
        found, record = _decode("$GPRMC,,V,,,,,,,,,,N*53\r\n")
        assert found is True
        assert record.status == "V"
        assert record.latitude == 0.0
        assert record.longitude == 0.0
        assert record.speed_knots == 0.0
        assert record.date == 0
        assert record.mode == "N"

    def test_no_rmc_header(self):
        found, record = _decode("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n")
        assert found is False
        assert record == RMCData()

    def test_truncated_sentence_skipped(self):
        found, record = _decode("$GPRMC,123519,A,4807.038,N")
        assert found is False
        assert record.type == ""

    def test_last_occurrence_wins(self):
        second = RMC.replace("123519", "123520").replace("084.4", "090.0")
        found, record = _decode(RMC + second)
        assert found is True
        assert record.time == "123520"
        assert record.course == pytest.approx(90.0)

    def test_other_talker_ignored(self):
        found, _ = _decode(RMC.replace("$GPRMC", "$GNRMC"))
        assert found is False

    def test_malformed_number_raises(self):
        with pytest.raises(FormatError):
            _decode(RMC.replace("022.4", "02x.4"))

    def test_redecoding_is_idempotent(self):
        _, first = _decode(RMC)
        _, second = _decode(RMC, first)
        assert second == _decode(RMC)[1]
