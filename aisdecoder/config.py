"""
Decoder Configuration

All settings loaded from environment variables with sensible defaults.
"""

import logging
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class DecoderSettings(BaseSettings):
    """AIS decoder configuration."""

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level used by configure_logging()"
    )
    log_format: str = Field(
        default="%(asctime)s - AIS_DECODER - %(levelname)s - %(message)s",
        description="Log record format"
    )

    # Dispatch
    unsupported_type_policy: Literal["raise", "skip"] = Field(
        default="raise",
        description="decode() on an unregistered message type: raise or log and return None"
    )

    # Text fields
    text_pad_chars: str = Field(
        default="@ ",
        description="Characters stripped from the right of decoded text fields"
    )

    class Config:
        env_file = ".env"
        env_prefix = "AIS_"
        extra = "ignore"


# Global settings instance
settings = DecoderSettings()


def configure_logging(level: Optional[str] = None):
    """Configure root logging from settings; an explicit level wins."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format
    )
