"""Entry point for the court-pairing command.

With no arguments (or -i) an interactive shell with command completion is
started; otherwise the arguments are handled as a single subcommand.
"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from courtpairing.cli import (
    create_check_parser,
    create_estimate_parser,
    create_main_parser,
    create_schedule_parser,
    run_check_command,
    run_estimate_command,
    run_schedule_command,
)
from courtpairing.utils import set_console_level, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "schedule": {
        "description": "Generate a schedule",
        "options": {
            "--players": "Number of players (default: 8)",
            "--names": "Comma separated player names",
            "--courts": "Number of courts (default: 2)",
            "--mode": "Pairing mode (rotating/fixed)",
            "--rounds": "Cap on rounds",
            "--seed": "Random seed for reproducibility",
            "--output": "Write the schedule as JSON to this file",
            "--format": "Output format (text/json)",
            "--validate": "Check the schedule",
        },
    },
    "estimate": {
        "description": "Suggest a round count",
        "options": {
            "--players": "Number of players",
            "--courts": "Number of courts",
            "--mode": "Pairing mode (rotating/fixed)",
        },
    },
    "check": {
        "description": "Validate a schedule file",
        "options": {
            "--file": "Schedule JSON file",
            "--max-spread": "Allowed gap in games played (default: 1)",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}

# command -> (parser factory, runner)
HANDLERS: Dict[
    str,
    Tuple[Callable[[], argparse.ArgumentParser], Callable[[argparse.Namespace], int]],
] = {
    "schedule": (create_schedule_parser, run_schedule_command),
    "estimate": (create_estimate_parser, run_estimate_command),
    "check": (create_check_parser, run_check_command),
}


def print_banner():
    """Print the application banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}COURT PAIRING{Colors.ENDC}"
        f" - round-robin doubles scheduling\n\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def execute_line(user_input: str) -> bool:
    """Run one line typed in interactive mode.

    Returns:
        False when the user asked to leave
    """
    if user_input in ["exit", "quit", "q", "/exit"]:
        return False

    if user_input in ["/help", "help", "?", "/list"]:
        print_commands_list()
        return True

    parts: List[str] = user_input.split()
    command = parts[0].lstrip("/")
    args_list = parts[1:]

    if command == "help":
        if args_list:
            print_command_help(args_list[0].lstrip("/"))
        else:
            print_commands_list()
        return True

    if command not in HANDLERS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
        return True

    create_parser, run = HANDLERS[command]
    try:
        args = create_parser().parse_args(args_list)
    except SystemExit:
        # argparse already printed the problem
        return True
    run(args)
    return True


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("court-pairing> ").strip()
            if not user_input:
                continue
            if not execute_line(user_input):
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0


def run_standard_mode(argv: List[str]) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode()

    set_console_level(logging.WARNING)
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the court-pairing CLI."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return run_interactive_mode()
    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
