"""
Parser Module

Turns a raw git commit message into a CommitMessage.

Grammar handled (Conventional Commits v1.0.0):

    type(scope)!: description

    optional body, which may contain
    BREAKING CHANGE: footer lines

The grammar is narrow enough that a couple of splits do the job, so there
is no regex here. parse() raises a ParseError subclass; try_parse() and
check_message() are the non-raising variants.
"""

from typing import Optional

from convcommit.message import CommitMessage

SEPARATOR = ': '
BREAKING_FOOTERS = ('BREAKING CHANGE: ', 'BREAKING-CHANGE: ')


class ParseError(ValueError):
    """Raised when a commit message is not a valid conventional commit."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class EmptyInputError(ParseError):
    """The message is empty or only whitespace."""
    pass


class EmptyHeaderError(ParseError):
    """The first line of the message is empty.

    parse() trims the message before splitting it, so its first line always
    starts with a non-whitespace character. This is a guard only; no input
    reaches it today.
    """
    pass


class MissingTypeSeparatorError(ParseError):
    """The first line has no 'type: description' split."""
    pass


class MultipleScopesSpecifiedError(ParseError):
    """The header has more than one (scope) group."""
    pass


class InvalidScopeSyntaxError(ParseError):
    """The header has no usable type, or an empty scope."""
    pass


def _split_subject(first_line: str) -> tuple[str, str]:
    """Split 'type(scope)!: description' on the first separator."""
    parts = [p.strip() for p in first_line.split(SEPARATOR, 1)]
    parts = [p for p in parts if p]
    if len(parts) != 2:
        raise MissingTypeSeparatorError(
            f"Unable to parse, commit message does not define commit type: {first_line!r}",
            first_line,
        )
    return parts[0], parts[1]


def _split_type_and_scope(header: str) -> tuple[str, Optional[str]]:
    """Split 'type' or 'type(scope)' (breaking marker already removed)."""
    # Only a scope group owns the closing paren; 'feat)' keeps it.
    if '(' in header and header.endswith(')'):
        header = header[:-1]
    parts = [p.strip() for p in header.split('(')]

    if len(parts) > 2:
        raise MultipleScopesSpecifiedError(
            f"Unable to parse, more than one scope was specified: {header!r}",
            header,
        )
    if not all(parts):
        raise InvalidScopeSyntaxError(
            f"Unable to parse, commit type contains an invalid scope: {header!r}",
            header,
        )
    if len(parts) == 2:
        return parts[0], parts[1]
    return parts[0], None


def split_lines(text: str) -> list[str]:
    """Split on \\n, \\r\\n and \\r only; other separators are part of the text."""
    return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')


def _is_breaking_footer(line: str) -> bool:
    return line.strip().startswith(BREAKING_FOOTERS)


def parse(message: str) -> CommitMessage:
    """
    Parse a git commit message into a CommitMessage.

    Raises:
        EmptyInputError: message is None, empty or whitespace
        EmptyHeaderError: first line is empty (guard; trimming rules it out)
        MissingTypeSeparatorError: no 'type: description' on the first line
        MultipleScopesSpecifiedError: e.g. 'feat(a)(b): x'
        InvalidScopeSyntaxError: empty type or scope, e.g. 'feat(): x'
    """
    if message is None or not message.strip():
        raise EmptyInputError("Unable to parse, commit message is empty.")

    lines = split_lines(message.strip())
    first_line = lines[0].strip()
    if not first_line:
        raise EmptyHeaderError("Unable to parse, first line of commit message is empty.")

    header, description = _split_subject(first_line)

    is_breaking_change = header.endswith('!')
    header = header.rstrip('!')

    commit_type, scope = _split_type_and_scope(header)

    body_lines = []
    for line in lines[1:]:
        body_lines.append(line)
        if _is_breaking_footer(line):
            is_breaking_change = True

    body = '\n'.join(body_lines).strip() or None

    return CommitMessage(
        commit_type=commit_type,
        description=description,
        scope=scope,
        body=body,
        is_breaking_change=is_breaking_change,
    )


def try_parse(message: str) -> Optional[CommitMessage]:
    """Like parse(), but returns None instead of raising ParseError."""
    try:
        return parse(message)
    except ParseError:
        return None


def check_message(message: str) -> tuple[bool, str]:
    """Validate a commit message. Returns (is_valid, failure_reason)."""
    try:
        parse(message)
    except ParseError as e:
        return False, str(e)
    return True, ""
