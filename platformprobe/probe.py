"""
Capability probing against host objects whose API shape is unknown ahead of time.

Every "extension not registered", "support code not importable" and
"operation missing on this plugin generation" outcome collapses into the
single UNAVAILABLE result, so strategies branch on a value instead of
handling each failure separately.
"""

from dataclasses import dataclass
from typing import Any, Callable

from .errors import ApiIncompatibilityError, UnknownDomainObjectError

# Conditions that mean "this host shape is not the one being probed for".
UNAVAILABLE_ERRORS = (
    UnknownDomainObjectError,
    ApiIncompatibilityError,
    ImportError,
    AttributeError,
)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single probe: either an available value or UNAVAILABLE."""

    value: Any = None
    available: bool = True

    def __bool__(self) -> bool:
        return self.available


UNAVAILABLE = ProbeResult(value=None, available=False)


def available(value: Any) -> ProbeResult:
    return ProbeResult(value=value, available=True)


def probe(func: Callable[..., Any], *args: Any, **kwargs: Any) -> ProbeResult:
    """
    Call func and wrap its return value.

    Errors in UNAVAILABLE_ERRORS become UNAVAILABLE; anything else, including
    ConfigurationError, propagates to the caller.
    """
    try:
        return available(func(*args, **kwargs))
    except UNAVAILABLE_ERRORS:
        return UNAVAILABLE
