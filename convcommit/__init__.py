"""
Conventional Commits

Parse, format and check git commit messages following
Conventional Commits v1.0.0.
"""

__version__ = "1.0.0"

from convcommit.message import CommitMessage, format_message
from convcommit.parser import (
    ParseError,
    EmptyInputError,
    EmptyHeaderError,
    MissingTypeSeparatorError,
    MultipleScopesSpecifiedError,
    InvalidScopeSyntaxError,
    parse,
    try_parse,
    check_message,
)

__all__ = [
    "CommitMessage",
    "format_message",
    "parse",
    "try_parse",
    "check_message",
    "ParseError",
    "EmptyInputError",
    "EmptyHeaderError",
    "MissingTypeSeparatorError",
    "MultipleScopesSpecifiedError",
    "InvalidScopeSyntaxError",
    "__version__",
]
