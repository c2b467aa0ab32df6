"""CLI Utility Functions"""

import sys

from convcommit.message import CommitMessage
from convcommit.output import colorize_header, dim, info, highlight, print_rule

# git commit --verbose appends the diff below this line
SCISSORS = '------------------------ >8 ------------------------'


def strip_git_comments(text: str, comment_char: str = '#') -> str:
    """Drop git comment lines and anything below the scissors line."""
    kept = []
    for line in text.split('\n'):
        if line.startswith(f"{comment_char} {SCISSORS}"):
            break
        if line.startswith(comment_char):
            continue
        kept.append(line)
    return '\n'.join(kept)


def read_message(message: str | None, path: str | None) -> str | None:
    """Resolve the commit message from an argument, a file, or piped stdin.

    Returns None when there is nothing to read (no argument and stdin is a terminal).
    Raises OSError if the file cannot be read.
    """
    if message is not None:
        return message
    if path == '-' or (path is None and not sys.stdin.isatty()):
        return sys.stdin.read()
    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    return None


def display_commit(commit: CommitMessage) -> None:
    """Show parsed fields with the canonical header on top."""
    subject = f"{commit.header}: {commit.description}"
    width = max(len(subject), 40)

    print()
    print_rule(width)
    print(colorize_header(subject))
    print_rule(width)

    print(f"  {dim('type:')}        {info(commit.commit_type)}")
    print(f"  {dim('scope:')}       {info(commit.scope) if commit.scope else dim('(none)')}")
    print(f"  {dim('description:')} {commit.description}")
    breaking = highlight('yes') if commit.is_breaking_change else 'no'
    print(f"  {dim('breaking:')}    {breaking}")
    print(f"  {dim('feature:')}     {'yes' if commit.is_new_feature else 'no'}")
    print(f"  {dim('bug fix:')}     {'yes' if commit.is_bug_fix else 'no'}")

    if commit.body:
        print(f"  {dim('body:')}")
        for line in commit.body.split('\n'):
            print(f"    {line}")
    print()
