# ABOUTME: Path matching component package
# ABOUTME: Exports the pattern compiler, match helpers and the default matcher

from .path_matcher import (
    CompiledPattern,
    PathMatch,
    PatternPathMatcher,
    compile_pattern,
    match,
    matches,
)

__all__ = ["CompiledPattern", "PathMatch", "PatternPathMatcher", "compile_pattern", "match", "matches"]
