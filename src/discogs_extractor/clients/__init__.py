"""
Client modules for external APIs.
"""

from .discogs import DiscogsClient

__all__ = [
    'DiscogsClient'
]
