"""
Data sources for the nimbus_wx library.

This package contains the network collaborators that retrieve raw report
text for a station identifier.
"""

from .avwx import AvWxSource

__all__ = [
    'AvWxSource',
]
