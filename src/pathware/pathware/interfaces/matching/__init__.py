# ABOUTME: Path matching interfaces package
# ABOUTME: Exports the abstract path matcher contract

from .path_matcher import AbstractPathMatcher

__all__ = ["AbstractPathMatcher"]
