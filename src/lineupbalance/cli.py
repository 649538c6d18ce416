"""Command-line interface for Lineup Balance.

With no arguments the built-in roster is searched against the built-in
Americano template with the default trial budget. Flags adjust the search
budget, seed and progress output; ``--interactive`` opens a prompt for
running several searches in one session.
"""

# Lineup Balance
# Copyright (C) 2025  Lineup Balance developers
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
import os
import shlex
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from lineupbalance import APP_NAME, APP_VERSION
from lineupbalance.constants import (
    EXIT_BROKEN_PIPE,
    EXIT_CONFIG_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    PARTNER_SEPARATOR,
    TEAM_SEPARATOR,
)
from lineupbalance.exceptions import LineupBalanceException
from lineupbalance.lineup import LineupTemplate, default_template
from lineupbalance.player import default_roster
from lineupbalance.report import ProgressPrinter, print_result
from lineupbalance.search import LineupSearch, SearchConfig, load_config
from lineupbalance.type_hints import Roster
from lineupbalance.utils import set_verbose, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for interactive output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Interactive command definitions with their options
COMMANDS = {
    "search": {
        "description": "Search for the most balanced lineup",
        "options": {
            "--trials": "Number of random assignments to try",
            "--seed": "Random seed for reproducibility",
            "--progress-every": "Print every k-th trial (0 = none)",
            "--quiet": "Do not print per-trial progress",
        },
    },
    "roster": {"description": "Show the roster in seat order", "options": {}},
    "template": {"description": "Show the lineup template seats", "options": {}},
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def add_search_arguments(parser: argparse.ArgumentParser) -> None:
    """Search flags shared by standard and interactive mode.

    Defaults are ``None`` so that only flags given explicitly override a
    config file.
    """
    parser.add_argument(
        "--trials", type=int, help="Number of random assignments to try (default: 1000000)"
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--progress-every",
        type=int,
        help="Print a progress line every k-th trial, 0 disables (default: 1)",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Do not print per-trial progress lines"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="lineup-balance",
        description="Place players into a fixed Americano lineup so matches are as even as possible",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference run: one million trials, every trial printed
  lineup-balance

  # Reproducible shorter run, progress every 1000 trials
  lineup-balance --trials 50000 --seed 7 --progress-every 1000

  # Interactive mode
  lineup-balance -i
        """,
    )
    add_search_arguments(parser)
    parser.add_argument("--config", help="Load search configuration from JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    return parser


def create_search_parser() -> argparse.ArgumentParser:
    """Create parser for the interactive search command."""
    parser = argparse.ArgumentParser(prog="search", description="Run a lineup search")
    add_search_arguments(parser)
    return parser


def build_config(
    args: argparse.Namespace, base: Optional[SearchConfig] = None
) -> SearchConfig:
    """Merge explicit flags over ``base`` (or the defaults)."""
    data = base.to_dict() if base is not None else SearchConfig().to_dict()
    if args.trials is not None:
        data["trials"] = args.trials
    if args.seed is not None:
        data["seed"] = args.seed
    if args.progress_every is not None:
        data["progress_every"] = args.progress_every
    if args.quiet:
        data["progress_every"] = 0
    return SearchConfig.from_dict(data)


def run_search(config: SearchConfig, roster: Roster, template: LineupTemplate) -> int:
    """Run one search and print progress, summary and lineup to stdout."""
    search = LineupSearch(roster, template, config, on_trial=ProgressPrinter())
    result = search.run()
    print_result(result, template)
    return EXIT_OK


def print_roster(roster: Roster) -> None:
    print(f"\n{Colors.BOLD}Roster ({len(roster)} players):{Colors.ENDC}")
    for seat, player in enumerate(roster):
        print(f"  Seat {seat:2}: {player.name} ({player.rating:g})")
    print()


def print_template(template: LineupTemplate) -> None:
    print(
        f"\n{Colors.BOLD}Template: {template.num_rounds} rounds, "
        f"{template.num_matches} matches, {template.num_seats} seats{Colors.ENDC}"
    )
    for round_number, round_courts in enumerate(template.rounds, start=1):
        courts = "   ".join(
            PARTNER_SEPARATOR.join(str(s) for s in court.team_one)
            + TEAM_SEPARATOR
            + PARTNER_SEPARATOR.join(str(s) for s in court.team_two)
            for court in round_courts
        )
        print(f"  Round {round_number:2}: {courts}")
    print()


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:10}{Colors.ENDC} - {info['description']}")
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
    """Create autocomplete completer for interactive mode.

    Every command completes both as ``command`` and ``/command``.
    """
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["quit"] = None
    completions["/quit"] = None

    return NestedCompleter.from_nested_dict(completions)


def handle_command(
    user_input: str,
    roster: Roster,
    template: LineupTemplate,
    base: Optional[SearchConfig] = None,
) -> bool:
    """Execute one interactive command line.

    Returns:
        False when the session should end, True otherwise
    """
    try:
        parts = shlex.split(user_input)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True
    if not parts:
        return True

    command = parts[0].lstrip("/")
    args_list = parts[1:]

    if command in ("exit", "quit", "q"):
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if command in ("help", "?", "list"):
        if args_list:
            print_command_help(args_list[0].lstrip("/"))
        else:
            print_commands_list()
        return True

    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
        return True

    try:
        if command == "search":
            args = create_search_parser().parse_args(args_list)
            run_search(build_config(args, base), roster, template)
        elif command == "roster":
            print_roster(roster)
        elif command == "template":
            print_template(template)
    except SystemExit:
        # argparse exits on bad arguments; stay in the session
        pass
    except LineupBalanceException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.error("Command failed: %s", e)
    return True


def run_interactive_mode(
    roster: Roster, template: LineupTemplate, base: Optional[SearchConfig] = None
) -> int:
    """Run in interactive mode with autocomplete."""
    print(
        f"\n{Colors.OKBLUE}{APP_NAME} {APP_VERSION}{Colors.ENDC}\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave\n"
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("lineup> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

        try:
            if not handle_command(user_input, roster, template, base):
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Search interrupted{Colors.ENDC}")

    return EXIT_OK


def _discard_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
    except (OSError, ValueError):
        pass


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lineup-balance CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_verbose(True)

    try:
        base = load_config(args.config) if args.config else None
        roster = default_roster()
        template = default_template()

        if args.interactive:
            return run_interactive_mode(roster, template, base)

        return run_search(build_config(args, base), roster, template)
    except LineupBalanceException as e:
        logger.error("Aborting: %s", e)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        # reader went away (e.g. piped into head); silence the final flush
        _discard_stdout()
        return EXIT_BROKEN_PIPE


if __name__ == "__main__":
    sys.exit(main())
