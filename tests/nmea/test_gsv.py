"""Tests for GSV sentence decoding and satellite-list reassembly."""

import pytest

from navstream.nmea.fields import FormatError
from navstream.nmea.framer import tokenize
from navstream.nmea.gsv import decode_gsv
from navstream.nmea.types import GSVData, SatelliteInView

HEADERS = frozenset({"$GPGSV"})

GSV_1 = "$GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74\r\n"
GSV_2 = "$GPGSV,3,2,11,14,25,170,00,16,57,208,39,18,67,296,40,19,40,246,00*74\r\n"
GSV_3 = "$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00*4D\r\n"

EXPECTED_PRNS = [3, 4, 6, 13, 14, 16, 18, 19, 22, 24, 27]


def _decode(text: str, record: GSVData) -> bool:
    return decode_gsv(tokenize(text), record, HEADERS)


class TestDecodeGSV:
    """Tests for decode_gsv function on single messages."""

    def test_first_message(self):
        record = GSVData()
        assert _decode(GSV_1, record) is True
        assert record.type == "$GPGSV"
        assert record.total_messages == 3
        assert record.message_number == 1
        assert record.satellites_in_view == 11
        assert len(record.satellites) == 4
        assert record.satellites[0] == SatelliteInView(prn=3, elevation=3, azimuth=111, snr=0)
        assert record.satellites[3] == SatelliteInView(prn=13, elevation=6, azimuth=292, snr=0)
        assert record.checksum == "*74"

    def test_partial_last_message_checksum_position(self):
        record = GSVData()
        _decode(GSV_3, record)
        # Three satellites written, so the checksum follows the third block
        assert record.checksum == "*4D"

    def test_empty_snr_is_zero(self):
        record = GSVData()
        _decode("$GPGSV,1,1,02,05,45,090,,07,12,300,33*70\r\n", record)
        assert record.satellites[0].snr == 0
        assert record.satellites[1].snr == 33
        assert record.checksum == "*70"

    def test_no_satellites_in_view(self):
        record = GSVData()
        assert _decode("$GPGSV,1,1,00*79\r\n", record) is True
        assert record.satellites_in_view == 0
        assert record.satellites == [SatelliteInView()] * 4
        assert record.checksum == "*79"

    def test_header_fields_truncated(self):
        record = GSVData()
        assert _decode("$GPGSV,3,1", record) is False
        assert record == GSVData()

    def test_blocks_cut_short_stop_at_last_complete_block(self):
        record = GSVData()
        assert _decode("$GPGSV,1,1,04,05,45,090,40,07,12", record) is True
        assert record.satellites[0] == SatelliteInView(prn=5, elevation=45, azimuth=90, snr=40)
        assert record.satellites[1] == SatelliteInView()
        # One block written, so the checksum is read at 4 + 4 * 1
        assert record.checksum == "*07"

    def test_malformed_azimuth_raises(self):
        with pytest.raises(FormatError):
            _decode(GSV_1.replace("111", "1l1"), GSVData())


class TestReassembly:
    """Tests for multi-message satellite list reassembly."""

    def test_three_messages_in_separate_cycles(self):
        record = GSVData()
        for message in (GSV_1, GSV_2, GSV_3):
            assert _decode(message, record) is True

        assert record.message_number == 3
        assert [sat.prn for sat in record.visible_satellites] == EXPECTED_PRNS
        assert all(sat.prn != 0 for sat in record.satellites[:11])

    def test_no_entry_written_beyond_declared_count(self):
        record = GSVData()
        for message in (GSV_1, GSV_2, GSV_3):
            _decode(message, record)

        assert len(record.satellites) == 12
        assert record.satellites[11] == SatelliteInView()

    def test_whole_group_in_one_cycle(self):
        record = GSVData()
        assert _decode(GSV_1 + GSV_2 + GSV_3, record) is True
        assert [sat.prn for sat in record.visible_satellites] == EXPECTED_PRNS
        assert record.checksum == "*4D"

    def test_second_message_first_grows_list(self):
        record = GSVData()
        _decode(GSV_2, record)
        assert len(record.satellites) == 8
        assert record.satellites[0] == SatelliteInView()
        assert record.satellites[4].prn == 14

    def test_list_never_shrinks(self):
        record = GSVData()
        for message in (GSV_1, GSV_2, GSV_3):
            _decode(message, record)

        _decode("$GPGSV,1,1,02,05,45,090,40,07,12,300,33*7C\r\n", record)

        assert len(record.satellites) == 12
        assert [sat.prn for sat in record.visible_satellites] == [5, 7]

    def test_entries_from_previous_group_are_kept(self):
        record = GSVData()
        for message in (GSV_1, GSV_2, GSV_3):
            _decode(message, record)

        _decode("$GPGSV,1,1,02,05,45,090,40,07,12,300,33*7C\r\n", record)

        # Slot 2 onwards still hold the older group's satellites
        assert record.satellites[2].prn == 6


class TestCorruptCounters:
    """Sentences with impossible group counters are skipped."""

    def test_huge_message_number_is_skipped(self):
        record = GSVData()
        found = _decode("$GPGSV,3,1000000,11,03,03,111,00*74\r\n", record)
        assert found is False
        assert record == GSVData()

    def test_message_number_beyond_total_is_skipped(self):
        record = GSVData()
        assert _decode(GSV_1.replace("$GPGSV,3,1,", "$GPGSV,3,4,"), record) is False
        assert record.satellites == []

    def test_message_number_zero_is_skipped(self):
        record = GSVData()
        assert _decode(GSV_1.replace("$GPGSV,3,1,", "$GPGSV,3,0,"), record) is False

    def test_too_many_messages_is_skipped(self):
        record = GSVData()
        assert _decode(GSV_1.replace("$GPGSV,3,1,", "$GPGSV,10,1,"), record) is False

    def test_too_many_satellites_is_skipped(self):
        record = GSVData()
        assert _decode(GSV_1.replace(",3,1,11,", ",3,1,100,"), record) is False

    def test_corrupt_message_keeps_reassembled_group(self):
        record = GSVData()
        for message in (GSV_1, GSV_2, GSV_3):
            _decode(message, record)

        _decode("$GPGSV,3,1000000,11,03,03,111,00*74\r\n", record)

        assert len(record.satellites) == 12
        assert record.message_number == 3
        assert [sat.prn for sat in record.visible_satellites] == EXPECTED_PRNS

    def test_valid_occurrence_after_corrupt_one_is_decoded(self):
        record = GSVData()
        assert _decode("$GPGSV,3,1000000,11,03,03,111,00*74\r\n" + GSV_1, record) is True
        assert record.message_number == 1
        assert len(record.satellites) == 4
