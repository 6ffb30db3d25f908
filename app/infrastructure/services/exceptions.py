"""Service wiring exceptions."""


class ServiceConfigurationError(Exception):
    """Base class for service wiring faults."""


class ServiceNotConfiguredError(ServiceConfigurationError):
    """A shared service was requested before configure() was called."""


class ServiceAlreadyConfiguredError(ServiceConfigurationError):
    """configure() was called again without replace=True."""
