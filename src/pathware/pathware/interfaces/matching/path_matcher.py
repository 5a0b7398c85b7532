# ABOUTME: Abstract path matcher interface consumed by the dispatcher
# ABOUTME: A matcher is a pure predicate over (pattern, path) plus load-time validation

from abc import ABC, abstractmethod


class AbstractPathMatcher(ABC):
    """
    Abstract base class for path matchers.

    The dispatcher consumes a single capability, "does pattern P match path
    S", and treats it as a pure, side-effect-free predicate.
    """

    @abstractmethod
    def validate(self, pattern: str) -> None:
        """
        Check that a pattern is usable.

        Called once per pattern while the configuration loads.

        Args:
            pattern: The path pattern to check.

        Raises:
            PathPatternError: If the pattern cannot be used.
        """
        pass

    @abstractmethod
    def matches(self, pattern: str, path: str) -> bool:
        """
        Test a request path against a validated pattern.

        Args:
            pattern: A pattern previously accepted by ``validate``.
            path: Absolute URL path beginning with ``/``.

        Returns:
            bool: True if the pattern matches the path.
        """
        pass
