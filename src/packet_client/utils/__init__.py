"""Utility modules for Packet API client."""

from .sanitizer import mask_sensitive_data, mask_headers

__all__ = [
    'mask_sensitive_data',
    'mask_headers',
]
