"""CLI Argument Parsing"""

import argparse
import argcomplete

from convcommit import __version__
from convcommit.config import VALID_OUTPUTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ccm',
        description='Parse, check and normalize Conventional Commits messages',
        epilog='Example: ccm --check -f .git/COMMIT_EDITMSG (use as a commit-msg hook)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Input
    parser.add_argument('message', nargs='?', metavar='MESSAGE', help='Commit message text (default: read stdin)')
    parser.add_argument('-f', '--file', type=str, metavar='PATH', help='Read the message from a file, "-" for stdin')
    parser.add_argument('--keep-comments', action='store_true', help='Do not strip git comment lines before parsing')

    # Modes
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--check', action='store_true', help='Only validate; exit 1 if the message is not a conventional commit')
    mode.add_argument('--normalize', action='store_true', help='Print the message in canonical form')

    # Output options
    parser.add_argument('-o', '--output', type=str, choices=sorted(VALID_OUTPUTS), help='Output style for parsed fields')
    parser.add_argument('--json', action='store_const', const='json', dest='output', help='Shorthand for --output json')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (line counts, canonical form)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
