class UnknownExcludeReasonError(ValueError):
    """
    Exception raised when a string does not name a known exclude reason.

    This exception is raised when deserializing path excludes whose reason is not one
    of the fixed set "BUILD_TOOL_OF", "DOCUMENTATION_OF" and "TEST_OF".

    Attributes:
        reason (str): The unrecognized reason string.

    Example:
        >>> error = UnknownExcludeReasonError("EXAMPLE_OF")
        >>> str(error)
        "Unknown exclude reason 'EXAMPLE_OF', expected one of: BUILD_TOOL_OF, DOCUMENTATION_OF, TEST_OF"
    """

    def __init__(self, reason: str) -> None:
        """
        Initialize the exception with the offending reason string.

        Args:
            reason (str): The reason string that could not be parsed.
        """
        self.reason = reason
        super().__init__(
            f"Unknown exclude reason {reason!r}, expected one of: BUILD_TOOL_OF, DOCUMENTATION_OF, TEST_OF"
        )


class InvalidPatternError(ValueError):
    """
    Exception raised when a path exclude is created with an unusable pattern.

    Example:
        >>> error = InvalidPatternError("Pattern must not be empty")
        >>> str(error)
        'Pattern must not be empty'
    """

    pass
