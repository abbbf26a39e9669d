"""
Utility classes for flow compilation.
"""

from .data_binding_extractor import DataBindingExtractor
from .wire_key_formatter import WireKeyFormatter

__all__ = [
    'DataBindingExtractor',
    'WireKeyFormatter'
]
