"""
Exceptions raised by the tunnel carver and the walker facade.
"""


class RandomWalkerError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidArgumentError(RandomWalkerError, ValueError):
    """A generation parameter is out of range or of the wrong type."""


class GenerationFailedError(RandomWalkerError, RuntimeError):
    """The walker made no progress for too many attempts in a row."""


class WalkerStateError(RandomWalkerError, RuntimeError):
    """An operation was called before the walker had a map to work on."""
