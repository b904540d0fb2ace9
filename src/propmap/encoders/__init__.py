"""
Pluggable encoders converting map values to and from stored text.

The property store only holds strings, so every map value crosses
this boundary on write and on load.
"""

from propmap.encoders.base import ValueEncoder
from propmap.encoders.json_encoder import JsonEncoder
from propmap.encoders.model_encoder import ModelEncoder

__all__ = ["ValueEncoder", "JsonEncoder", "ModelEncoder"]
