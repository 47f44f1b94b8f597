# errors.py


class PestError(Exception):
    """Base class for pest errors."""


class ConfigError(PestError):
    """Configuration file could not be read."""


class WindowError(PestError):
    """Backing window could not be created."""


class ResourceError(PestError):
    """Image resource could not be loaded."""


class PanicError(PestError):
    """Raised by the right-click panic switch. Never handled."""
