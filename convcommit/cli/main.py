"""CLI Main Entry Point"""

import json
import os
import sys

from convcommit.config import load_config
from convcommit.message import format_message
from convcommit.parser import ParseError, parse, check_message, split_lines
from convcommit.output import dim, print_error, print_success, print_warning

from convcommit.cli.args import parse_args
from convcommit.cli.commands import display_config, run_setup, run_install_completion
from convcommit.cli.utils import display_commit, read_message, strip_git_comments


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _get_output(args, config):
    """Resolve output style.

    Precedence: CLI args > environment variables > config file
    """
    return args.output or os.environ.get('CCM_OUTPUT') or config.output


def _load_text(args, config):
    """Read the message and drop git comments if configured.

    Returns:
        str or None if no message could be read (error already printed)
    """
    try:
        text = read_message(args.message, args.file)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Could not read {args.file or 'stdin'}: {e}")
        return None

    if text is None:
        print_error("No commit message given. Pass MESSAGE, --file PATH, or pipe it on stdin.")
        return None

    if config.strip_comments and not args.keep_comments:
        text = strip_git_comments(text, config.comment_char)
    return text


def _subject_length(text):
    stripped = text.strip()
    return len(split_lines(stripped)[0].strip()) if stripped else 0


def _check_flow(text, config, is_pipe):
    """Validate only. Returns exit code."""
    valid, reason = check_message(text)
    if not valid:
        print_error(reason)
        print(dim("  Expected: type(scope)!: description"), file=sys.stderr)
        return 1

    length = _subject_length(text)
    if length > config.max_subject_length:
        print_warning(f"Subject line is {length} characters (max {config.max_subject_length})")

    if not is_pipe:
        print_success("Valid conventional commit")
    return 0


def _print_verbose_stats(args, is_pipe, text, commit):
    """Print input statistics and whether the input was already canonical."""
    if not args.verbose or is_pipe:
        return
    canonical = format_message(commit)
    body_lines = len(commit.body.split('\n')) if commit.body else 0
    print(dim(f"  Input: {len(split_lines(text))} lines ({len(text)} chars)"))
    print(dim(f"  Subject: {_subject_length(text)} chars, body: {body_lines} lines"))
    print(dim(f"  Canonical: {'yes' if canonical == text.strip() else 'no'}"))


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    is_pipe = not sys.stdout.isatty()

    text = _load_text(args, config)
    if text is None:
        return 1

    if args.check:
        return _check_flow(text, config, is_pipe)

    try:
        commit = parse(text)
    except ParseError as e:
        print_error(str(e))
        return 1

    if args.normalize:
        print(format_message(commit))
        return 0

    if _get_output(args, config) == 'json':
        print(json.dumps(commit.to_dict(), indent=2))
        return 0

    display_commit(commit)
    _print_verbose_stats(args, is_pipe, text, commit)
    return 0


def run() -> None:
    sys.exit(main())
