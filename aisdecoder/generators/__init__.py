"""
Payload Generators
Build armored AIS payloads from field values
"""

from .payload_encoder import PayloadEncoder

__all__ = ['PayloadEncoder']
