"""Utility layer errors."""


class UtilError(Exception):
    """Base error for logging, observability and wiring helpers."""

    pass


class ConfigurationError(UtilError):
    """Settings are inconsistent with the requested setup."""

    pass


class DependencyInjectionError(UtilError):
    """A provider or container could not be resolved."""

    pass
