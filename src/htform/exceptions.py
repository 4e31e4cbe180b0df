"""Errors raised by htform."""


class FormError(Exception):
    pass


class ConfigurationError(FormError):
    """A malformed element configuration, such as an unparsable step."""


class ValidationError(FormError):
    """An element cannot be rendered or validated in its current state."""


class InvalidArgumentError(FormError, ValueError):
    """A configuration value outside the accepted set."""
