"""Error types raised while building a site.

Every failure during a build is fatal. Errors are chained with ``raise ... from``
so the command line can print the full cause chain.
"""

from __future__ import annotations


class SiteError(Exception):
    """Base class for all build failures."""


class ConfigError(SiteError):
    """The site configuration could not be read or is invalid."""


class ContentError(SiteError):
    """A content file could not be read or placed in the output tree."""


class UncategorizedContentError(ContentError):
    """A content file sits outside every configured category."""


class TemplateError(SiteError):
    """A template is missing, malformed, or references an unknown value."""


class OutputError(SiteError):
    """The output tree could not be written."""


class UnknownCategoryError(SiteError):
    """A listing was requested for a category that is not configured."""


def format_error_chain(exc: BaseException) -> list[str]:
    lines = [f"error: {exc}"]
    seen = {id(exc)}
    cause = exc.__cause__ or exc.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        message = str(cause) or type(cause).__name__
        lines.append(f"  caused by: {message}")
        cause = cause.__cause__ or cause.__context__
    return lines
