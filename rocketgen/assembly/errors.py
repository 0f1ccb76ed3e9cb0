"""Errors raised while assembling a rocket."""


class RocketError(Exception):
    """Base class for rocket assembly failures."""


class ConfigurationError(RocketError):
    """The requested rocket height is below the minimum buildable size."""


class NoEligiblePartError(RocketError):
    """No catalog part satisfies the constraints of the current phase."""


class UnsatisfiableHeightError(RocketError):
    """The decoration phase cannot fill the remaining height exactly."""
