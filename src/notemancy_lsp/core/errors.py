"""Exceptions raised by notemancy components."""


class NotemancyError(Exception):
    """Base class for notemancy errors."""


class ConfigError(NotemancyError):
    """The vault configuration is missing, unreadable or incomplete."""


class TitleNotFoundError(NotemancyError):
    """A note has neither a frontmatter title nor a level-1 heading."""


class WorkspaceError(NotemancyError):
    """A workspace grouping operation could not be applied."""
