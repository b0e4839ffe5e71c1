# Object Creator Panels Package
"""
Window controllers for the creator.

Panels:
  - Creator: Query field, filtered type list and commit to disk
"""

from .creator import CreatorPanel, NOT_FOUND_LABEL

__all__ = ["CreatorPanel", "NOT_FOUND_LABEL"]
