# -*- coding: utf-8 -*-


class AssToolsError(Exception):
    """Base class for errors raised while reading, rewriting or writing a script."""
    pass


class FormatError(AssToolsError, ValueError):
    """The input violates the structure of the script format."""
    pass


class NotFoundError(AssToolsError, LookupError):
    """A referenced file or section does not exist."""
    pass
