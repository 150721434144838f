"""
PixelCaster services.

Formatting of engine output for external consumers.
"""

from pixelcaster.services.metadata import build_metadata, token_name

__all__ = [
    "build_metadata",
    "token_name",
]
