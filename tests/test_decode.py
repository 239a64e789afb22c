"""
Tests for message type dispatch
"""

import logging

import pytest

import aisdecoder
from aisdecoder.config import settings
from aisdecoder.exceptions import ArmorError, LengthError, UnsupportedMessageError
from aisdecoder.parsers import PARSERS, decode, get_parser, message_type_of
from aisdecoder.parsers.static_voyage import StaticVoyageDataParser
from aisdecoder.schema import (
    BaseStationReport,
    ClassBPositionReport,
    ExtendedClassBPositionReport,
    PositionReport,
    SARAircraftPositionReport,
    StaticDataReport,
    StaticVoyageData,
)

SAMPLES = [
    ("15RTgt0PAso;90TKcjM8h6g208CQ", PositionReport),
    ("403OviQuMGCqWrRO9>E6fE700@GO", BaseStationReport),
    ("55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp888888888880", StaticVoyageData),
    ("91b55wi;hbOS@OdQAC062Ch2089h", SARAircraftPositionReport),
    ("B52K>;h00Fc>jpUlNV@ikwpUoP06", ClassBPositionReport),
    ("C5N3SRgPEnJGEBT>NhWAwwo862PaLELTBJ:V00000000S0D:R220", ExtendedClassBPositionReport),
    ("H42O55i18tMET00000000000000", StaticDataReport),
]

# Type 8 binary broadcast, no parser registered
UNSUPPORTED_PAYLOAD = "85Mwp`1Kf3aCnsNvBWLi=wQuNhA5t43N`5nCuI=p<IBfVqnROgK"


class TestDispatch:

    @pytest.mark.parametrize("payload, record_type", SAMPLES)
    def test_decode_by_type(self, payload, record_type):
        message = decode(payload)
        assert isinstance(message, record_type)
        assert message.message_type == message_type_of(payload)

    def test_package_level_decode(self):
        message = aisdecoder.decode(SAMPLES[2][0])
        assert message.call_sign == "3FOF8"

    def test_registry(self):
        assert set(PARSERS) == {1, 2, 3, 4, 5, 9, 11, 18, 19, 24}
        assert get_parser(5) is StaticVoyageDataParser
        assert get_parser(2) is get_parser(3)

    def test_message_type_of(self):
        assert message_type_of("15RT") == 1
        assert message_type_of("H42O") == 24

    def test_empty_payload(self):
        with pytest.raises(LengthError):
            decode("")

    def test_invalid_first_character(self):
        with pytest.raises(ArmorError):
            decode("x5RTgt0PAso;90TKcjM8h6g208CQ")

    def test_decode_error_aborts(self):
        # Truncated type 5: nothing is returned
        with pytest.raises(LengthError):
            decode(SAMPLES[2][0][:60])


class TestUnsupportedTypes:

    def test_raise_policy(self):
        with pytest.raises(UnsupportedMessageError) as excinfo:
            decode(UNSUPPORTED_PAYLOAD)
        assert excinfo.value.message_type == 8

    def test_get_parser_unknown(self):
        with pytest.raises(UnsupportedMessageError):
            get_parser(27)

    def test_skip_policy(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "unsupported_type_policy", "skip")

        with caplog.at_level(logging.WARNING, logger="aisdecoder.parsers"):
            assert decode(UNSUPPORTED_PAYLOAD) is None

        assert "unsupported message type 8" in caplog.text

    def test_skip_policy_still_rejects_bad_payloads(self, monkeypatch):
        monkeypatch.setattr(settings, "unsupported_type_policy", "skip")
        with pytest.raises(LengthError):
            decode(SAMPLES[0][0][:20])


class TestDecodeLogging:

    def test_debug_record(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="aisdecoder.parsers.base"):
            decode(SAMPLES[0][0])

        assert "MMSI 371798000" in caplog.text
        assert "168 bits" in caplog.text
