"""Exception types raised by the split resolution engine."""
from __future__ import annotations


class ResolutionError(Exception):
    """Base class for engine errors."""


class ConfigurationError(ResolutionError, ValueError):
    """A rule table or scoring setup is unusable (raised at build time)."""


class ContractViolation(ResolutionError, LookupError):
    """Caller passed inputs that do not match the data cube."""
