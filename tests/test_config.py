"""
Tests for settings and logging setup
"""

import logging

from aisdecoder.config import DecoderSettings, configure_logging, settings
from aisdecoder.parsers.static_voyage import StaticVoyageDataParser

KNOWN_PAYLOAD = (
    "53`l7@02:N2W<HtKP00<50F1@E=@000000000016<PD:<5bfNCTSm51DQ0C@00000000000"
)


class TestDecoderSettings:

    def test_defaults(self):
        defaults = DecoderSettings()
        assert defaults.log_level == "INFO"
        assert defaults.unsupported_type_policy == "raise"
        assert defaults.text_pad_chars == "@ "

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("AIS_UNSUPPORTED_TYPE_POLICY", "skip")
        monkeypatch.setenv("AIS_LOG_LEVEL", "DEBUG")

        configured = DecoderSettings()

        assert configured.unsupported_type_policy == "skip"
        assert configured.log_level == "DEBUG"

    def test_pad_chars_drive_trimming(self, monkeypatch):
        monkeypatch.setattr(settings, "text_pad_chars", "@")
        values = StaticVoyageDataParser.read_fields(KNOWN_PAYLOAD)
        assert values["call_sign"] == "3FOF8"

        monkeypatch.setattr(settings, "text_pad_chars", "")
        values = StaticVoyageDataParser.read_fields(KNOWN_PAYLOAD)
        assert values["call_sign"] == "3FOF8@@"


class TestConfigureLogging:

    def test_explicit_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        configure_logging("debug")

        assert calls["level"] == "DEBUG"
        assert "AIS_DECODER" in calls["format"]

    def test_level_from_settings(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        monkeypatch.setattr(settings, "log_level", "warning")

        configure_logging()

        assert calls["level"] == "WARNING"
