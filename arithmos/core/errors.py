"""Exception hierarchy for arithmos."""


class ArithmosError(Exception):
    """Base class for all arithmos errors."""


class CapabilityError(ArithmosError, TypeError):
    """A value or type lacks a capability an operation requires.

    Raised, for example, when asking an unsigned type for its sign or when
    computing a gcd over floats.
    """

    def __init__(self, subject, capability: str, detail: str = ""):
        self.subject = subject
        self.capability = capability
        name = getattr(subject, "__name__", type(subject).__name__)
        message = f"{name} does not implement {capability}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RepresentationOverflowError(ArithmosError, OverflowError):
    """A fixed-width type cannot represent the exact result of an operation."""
