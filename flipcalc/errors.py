"""Error types raised by the engine."""


class InvalidArgument(ValueError):
    """A value outside a formula's domain (negative price, zero term, ...)."""
