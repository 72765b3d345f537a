"""
Top‑level package for the Announcement Board.

All functionality lives in submodules under ``app``.
"""

__all__ = []
