"""Exception hierarchy for navcheck."""


class NavCheckError(Exception):
    """Base exception for all navcheck errors."""


class TransientError(NavCheckError):
    """Errors that depend on live page state and may clear on a later run."""


class PermanentError(NavCheckError):
    """Errors that require configuration or code changes."""


class ConfigurationError(PermanentError):
    """Invalid or missing configuration."""


class NavigationError(TransientError):
    """Page navigation failed, may succeed on retry."""


class ElementNotFound(TransientError):  # noqa: N818
    """Element could not be acted on within the allotted wait."""


class ResolutionFailure(TransientError):  # noqa: N818
    """A locator matched zero elements or more than one element.

    Attributes:
        name: Report label of the element being resolved.
        locator: Human-readable description of the locator.
        reason: Why resolution failed (e.g. "no matching element").
    """

    def __init__(self, name: str, locator: str, reason: str) -> None:
        """Initialize ResolutionFailure.

        Args:
            name: Report label of the element being resolved.
            locator: Human-readable description of the locator.
            reason: Why resolution failed.
        """
        self.name = name
        self.locator = locator
        self.reason = reason
        super().__init__(f"Could not resolve '{name}' ({locator}): {reason}")


class ExpectationMismatch(TransientError):  # noqa: N818
    """A resolved element did not reach the expected state in time.

    Attributes:
        name: Report label of the element under check.
        expected: The expected value.
        observed: The value read from the page after the wait expired.
    """

    def __init__(self, name: str, expected: str, observed: str | None) -> None:
        """Initialize ExpectationMismatch.

        Args:
            name: Report label of the element under check.
            expected: The expected value.
            observed: The value read from the page, or None if unreadable.
        """
        self.name = name
        self.expected = expected
        self.observed = observed
        super().__init__(
            f"'{name}': expected {expected!r}, observed {observed!r}"
        )
