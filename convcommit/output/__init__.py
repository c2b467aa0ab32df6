"""
Terminal Output

ANSI styling for ccm. Honors NO_COLOR / FORCE_COLOR, only colors a
terminal, and swaps Unicode symbols for ASCII when stdout can't encode them.
"""

import os
import re
import sys


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


# name -> (unicode, ascii)
SYMBOLS = {
    'ok': ('✓', '[OK]'),
    'fail': ('✗', '[X]'),
    'warn': ('⚠', '[!]'),
    'rule': ('─', '-'),
}


def _enable_windows_ansi() -> bool:
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
    except (AttributeError, OSError):
        return False
    return True


def _color_wanted() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not getattr(sys.stdout, 'isatty', lambda: False)():
        return False
    if sys.platform == 'win32':
        return _enable_windows_ansi()
    return True


def _stdout_encodes_symbols() -> bool:
    sample = ''.join(unicode for unicode, _ in SYMBOLS.values())
    try:
        sample.encode(getattr(sys.stdout, 'encoding', None) or 'utf-8')
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _color_wanted()
UNICODE_ENABLED = _stdout_encodes_symbols()


def symbol(name: str) -> str:
    unicode, ascii_fallback = SYMBOLS[name]
    return unicode if UNICODE_ENABLED else ascii_fallback


def style(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def info(text: str) -> str:
    return style(text, Colors.CYAN)


def dim(text: str) -> str:
    return style(text, Colors.DIM)


def bold(text: str) -> str:
    return style(text, Colors.BOLD)


def highlight(text: str) -> str:
    return style(text, Colors.MAGENTA)


def print_success(message: str) -> None:
    print(f"{style(symbol('ok'), Colors.GREEN)} {message}")


def print_error(message: str) -> None:
    print(f"{style(symbol('fail'), Colors.RED)} {style(message, Colors.RED)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(style(f"{symbol('warn')} {message}", Colors.YELLOW))


def print_rule(width: int) -> None:
    print(dim(symbol('rule') * width))


# Display only; any type parses, unknown ones get no color
COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}

_HEADER_PREFIX = re.compile(r'^([^\s(:!]+)(\([^)]*\))?(!?:)')


def colorize_header(subject: str) -> str:
    """Bold a subject line, coloring its 'type(scope)!:' prefix by commit type."""
    match = _HEADER_PREFIX.match(subject)
    if not match:
        return bold(subject)
    prefix = match.group(0)
    color = COMMIT_TYPE_COLORS.get(match.group(1).lower(), '')
    rest = subject[len(prefix):]
    return style(prefix, Colors.BOLD, color) + (bold(rest) if rest else '')


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED", "SYMBOLS",
    "symbol", "style", "info", "dim", "bold", "highlight",
    "print_success", "print_error", "print_warning", "print_rule",
    "colorize_header", "COMMIT_TYPE_COLORS",
]
