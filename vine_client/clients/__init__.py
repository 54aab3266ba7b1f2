"""
Transport adapters used by the vine_client facade.
"""

__all__ = [
    "http_client",
]
