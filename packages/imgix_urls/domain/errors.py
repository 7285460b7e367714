"""Error taxonomy. Every failure is a programmer or configuration error."""

from __future__ import annotations


class ImgixError(Exception):
    """Base class for errors raised by the URL builder."""


class ConfigurationError(ImgixError, ValueError):
    """Builder configuration is invalid (raised at construction time)."""


class InvalidArgumentError(ImgixError, ValueError):
    """An argument to a build call is malformed (e.g. srcset bounds)."""
