"""
Exception taxonomy for platform discovery.

Only ConfigurationError is meant to cross a strategy boundary; the other
errors describe conditions the resolver absorbs as "not applicable" or
downgrades to an empty contribution.
"""


class PlatformProbeError(Exception):
    """Base class for all platformprobe errors."""

    pass


class UnknownDomainObjectError(PlatformProbeError, LookupError):
    """Raised when a named or typed object is not registered on the host."""

    pass


class ApiIncompatibilityError(PlatformProbeError):
    """Raised by host objects whose installed plugin generation lacks an expected operation."""

    pass


class ResolveError(PlatformProbeError):
    """Raised when a structured file collection cannot be resolved to concrete files."""

    pass


class ConfigurationError(PlatformProbeError):
    """Raised when the host project lacks configuration the resolver requires."""

    pass


class ProjectDescriptionError(PlatformProbeError):
    """Raised when a TOML project description cannot be turned into a host project."""

    pass
