"""
Exception hierarchy for the banner service.
Handlers catch ``BannerServiceError`` at the request boundary.
"""


class BannerServiceError(Exception):
    """Base class for every error raised by this service."""


class ConfigurationError(BannerServiceError):
    """Required configuration is missing; fatal at startup."""


class DatabaseConnectionError(BannerServiceError):
    """MongoDB could not be reached."""


class BannerQueryError(BannerServiceError):
    """A read against the banners collection failed."""


class BannerWriteError(BannerServiceError):
    """A write against the banners collection failed."""


class InvalidBannerError(BannerServiceError, ValueError):
    """A banner does not satisfy the record schema."""
