class TypetutorError(Exception):
    """Base class for errors raised by typetutor."""


class ConfigError(TypetutorError, ValueError):
    """A settings value or generator name could not be understood."""
