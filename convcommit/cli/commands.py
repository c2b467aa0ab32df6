"""CLI Commands"""

import os

from convcommit.cli.args import build_parser
from convcommit.config import Config, load_config, save_config, get_config_path
from convcommit.output import bold, dim, info, print_success


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .ccrc found)")

    env_output = os.environ.get('CCM_OUTPUT')
    if env_output:
        print(f"  {dim('Environment overrides:')}")
        print(f"    CCM_OUTPUT={env_output}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    output:             {info(config.output)}")
    print(f"    max_subject_length: {info(str(config.max_subject_length))}")
    print(f"    strip_comments:     {info(str(config.strip_comments).lower())}")
    print(f"    comment_char:       {info(config.comment_char)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .ccrc (in current directory)")
    print(f"    Global: ~/.ccrc")
    print(f"\n  {dim('Run')} ccm --setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    print("Output style for parsed messages:\n")
    print("  1. text - readable field list (default)")
    print("  2. json - machine readable\n")

    output = "text"
    while True:
        choice = input("Select [1/2] (Enter for default): ").strip()
        if choice == '' or choice == '1':
            output = 'text'
            break
        elif choice == '2':
            output = 'json'
            break

    print("\nMax subject line length (Enter for 72): ", end='')
    max_len_input = input().strip()
    max_subject_length = int(max_len_input) if max_len_input.isdigit() and int(max_len_input) > 0 else 72

    print("\nStrip git comment lines before parsing? [Y/n]: ", end='')
    strip_comments = input().strip().lower() != 'n'

    config = Config(
        output=output,
        max_subject_length=max_subject_length,
        strip_comments=strip_comments,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


# shell name (basename of $SHELL) -> startup file
COMPLETION_RC_FILES = {
    'bash': '~/.bashrc',
    'zsh': '~/.zshrc',
}


def completion_hook(prog: str) -> str:
    return f'eval "$(register-python-argcomplete {prog})"'


def run_install_completion() -> int:
    """Show the argcomplete hook for the current shell."""
    prog = build_parser().prog
    shell = os.path.basename(os.environ.get('SHELL', ''))
    rc_file = COMPLETION_RC_FILES.get(shell)

    print(f"\n{bold('Tab Completion Setup')}\n")

    if rc_file:
        print(f"Add this line to {dim(os.path.expanduser(rc_file))}:\n")
        print(f"  {completion_hook(prog)}\n")
        print(f"Then run: {dim(f'source {rc_file}')}")
    else:
        print(f"Shell {shell or '(unknown)'} is not set up automatically.")
        print("Load this in your shell's startup file:\n")
        print(f"  {completion_hook(prog)}")

    print(f"\n{dim(f'After setup, press TAB to complete {prog} flags.')}")
    return 0
