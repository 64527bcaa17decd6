"""
Normalize package: null-safe mapping of raw Jira issues into Story records.
"""

from .util import StoryNormalizer, normalize_story

__all__ = ["StoryNormalizer", "normalize_story"]
