"""
Tests for AIS message type 5 (static and voyage related data)

Test data:
- gpsd sample.aivdm, two-sentence type 5 reassembled
- Payload built field by field for a known set of raw values
"""

import pytest
from pydantic import ValidationError

from aisdecoder.exceptions import ArmorError, DecodeError, LengthError
from aisdecoder.generators import PayloadEncoder
from aisdecoder.parsers.static_voyage import StaticVoyageDataParser
from aisdecoder.schema import StaticVoyageData

# !AIVDM,2,1,1,A,55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp8,0*1C
# !AIVDM,2,2,1,A,88888888880,2*25
GPSD_PAYLOAD = (
    "55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp8"
    "88888888880"
)

# imo=9074729, call sign=3FOF8, ship type=70, draught=78
KNOWN_PAYLOAD = (
    "53`l7@02:N2W<HtKP00<50F1@E=@000000000016<PD:<5bfNCTSm51DQ0C@00000000000"
)

KNOWN_VALUES = {
    "message_type": 5,
    "repeat_indicator": 0,
    "mmsi": 244123456,
    "ais_version": 0,
    "imo_number": 9074729,
    "call_sign": "3FOF8",
    "name": "CAPE TEST",
    "ship_type": 70,
    "to_bow": 100,
    "to_stern": 20,
    "to_port": 10,
    "to_starboard": 12,
    "epfd": 1,
    "eta_month": 6,
    "eta_day": 21,
    "eta_hour": 14,
    "eta_minute": 30,
    "draught": 78,
    "destination": "ROTTERDAM",
    "dte": False,
}


@pytest.fixture
def encoder():
    return PayloadEncoder()


def encode(encoder, **overrides):
    values = dict(KNOWN_VALUES, **overrides)
    return encoder.encode(StaticVoyageDataParser.FIELDS, values)


class TestStaticVoyageData:

    def test_known_values(self):
        message = StaticVoyageDataParser.decode(KNOWN_PAYLOAD)

        assert isinstance(message, StaticVoyageData)
        assert message.imo_number == 9074729
        assert message.call_sign == "3FOF8"
        assert message.ship_type == 70
        assert message.maximum_draught == 7.8
        assert message.name == "CAPE TEST"
        assert message.destination == "ROTTERDAM"
        assert message.eta_month == 6
        assert message.eta_day == 21
        assert message.eta_hour == 14
        assert message.eta_minute == 30
        assert message.data_terminal_ready is True

    def test_encoder_builds_same_payload(self, encoder):
        assert encode(encoder) == KNOWN_PAYLOAD

    def test_gpsd_sample(self):
        message = StaticVoyageDataParser.decode(GPSD_PAYLOAD)

        assert message.message_type == 5
        assert message.repeat_indicator == 0
        assert message.mmsi == 351759000
        assert message.ais_version == 0
        assert message.imo_number == 9134270
        assert message.call_sign == "3FOF8"
        assert message.name == "EVER DIADEM"
        assert message.ship_type == 70
        assert message.to_bow == 225
        assert message.to_stern == 70
        assert message.to_port == 1
        assert message.to_starboard == 31
        assert message.ship_length == 295
        assert message.ship_width == 32
        assert message.epfd == 1
        assert (message.eta_month, message.eta_day) == (5, 15)
        assert (message.eta_hour, message.eta_minute) == (14, 0)
        assert message.maximum_draught == pytest.approx(12.2)
        assert message.destination == "NEW YORK"
        assert message.data_terminal_ready is True

    def test_record_is_immutable(self):
        message = StaticVoyageDataParser.decode(KNOWN_PAYLOAD)
        with pytest.raises(ValidationError):
            message.imo_number = 1

    def test_decode_twice_is_identical(self):
        first = StaticVoyageDataParser.decode(GPSD_PAYLOAD)
        second = StaticVoyageDataParser.decode(GPSD_PAYLOAD)
        assert first == second
        assert first is not second

    def test_raw_fields_in_table_order(self):
        values = StaticVoyageDataParser.read_fields(KNOWN_PAYLOAD)
        assert list(values) == [
            name for name in StaticVoyageDataParser.FIELDS.names if name != "spare"
        ]
        assert values == KNOWN_VALUES


class TestStaticVoyageSentinels:

    def test_not_available_values(self, encoder):
        payload = encode(
            encoder, imo_number=0, eta_month=0, eta_day=0,
            eta_hour=24, eta_minute=60, draught=0,
        )
        message = StaticVoyageDataParser.decode(payload)

        assert message.imo_number is None
        assert message.eta_month is None
        assert message.eta_day is None
        assert message.eta_hour is None
        assert message.eta_minute is None
        assert message.maximum_draught is None

    def test_boundary_values_are_not_sentinels(self, encoder):
        payload = encode(encoder, eta_hour=0, eta_minute=0, draught=255)
        message = StaticVoyageDataParser.decode(payload)

        assert message.eta_hour == 0
        assert message.eta_minute == 0
        assert message.maximum_draught == 25.5

    def test_draught_scaling(self, encoder):
        message = StaticVoyageDataParser.decode(encode(encoder, draught=105))
        assert message.maximum_draught == 10.5

    def test_dte_not_ready(self, encoder):
        message = StaticVoyageDataParser.decode(encode(encoder, dte=True))
        assert message.data_terminal_ready is False


class TestStaticVoyageText:

    def test_empty_text(self, encoder):
        message = StaticVoyageDataParser.decode(encode(encoder, call_sign="", name=""))
        assert message.call_sign == ""
        assert message.name == ""

    def test_embedded_padding_kept(self, encoder):
        message = StaticVoyageDataParser.decode(encode(encoder, name="AB@CD"))
        assert message.name == "AB@CD"

    def test_leading_space_kept(self, encoder):
        message = StaticVoyageDataParser.decode(encode(encoder, destination=" PORT"))
        assert message.destination == " PORT"

    def test_full_width_text(self, encoder):
        name = "ABCDEFGHIJKLMNOPQRST"
        message = StaticVoyageDataParser.decode(encode(encoder, name=name))
        assert message.name == name


class TestStaticVoyageEnvelope:

    def test_minimum_length(self):
        # 71 characters = 426 bits, the shortest armored type 5
        assert len(KNOWN_PAYLOAD) == 71
        StaticVoyageDataParser.decode(KNOWN_PAYLOAD)

    def test_trailing_padding_accepted(self):
        payload = KNOWN_PAYLOAD + "0" * 20
        message = StaticVoyageDataParser.decode(payload)
        assert message.imo_number == 9074729

    def test_maximum_length_accepted(self):
        # 91 characters = 546 bits
        payload = KNOWN_PAYLOAD + "0" * 20
        assert len(payload) * 6 <= StaticVoyageDataParser.MAX_BITS
        StaticVoyageDataParser.decode(payload)

    def test_too_short(self):
        with pytest.raises(LengthError):
            StaticVoyageDataParser.decode(KNOWN_PAYLOAD[:70])

    def test_too_long(self):
        with pytest.raises(LengthError):
            StaticVoyageDataParser.decode(KNOWN_PAYLOAD + "0" * 21)

    def test_invalid_character(self):
        with pytest.raises(ArmorError):
            StaticVoyageDataParser.decode(KNOWN_PAYLOAD[:-1] + "x")

    def test_wrong_message_type(self):
        # Same length, type 1 in the first character
        with pytest.raises(DecodeError):
            StaticVoyageDataParser.decode("1" + KNOWN_PAYLOAD[1:])
