"""Command-line interface for Santa Pairing.

Usage::

    santa-pairing <namesFile> <assignmentsFile> <checkPreviousAssignments> \\
                  <allowReciprocal> [verboseOutput]

Example: ``santa-pairing names.txt assignments.txt true false``
"""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
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
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import confirm
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import Validator

from santapairing.constants import (
    DEFAULT_ASSIGNMENTS_FILE,
    DEFAULT_NAMES_FILE,
    FALSE_VALUES,
    TRUE_VALUES,
)
from santapairing.exceptions import (
    InvalidConfigurationException,
    SantaPairingException,
)
from santapairing.files.assignments import (
    format_assignments,
    read_previous_pairs,
    write_assignments,
)
from santapairing.files.names import load_roster
from santapairing.models.pairing_config import PairingConfig
from santapairing.models.pairing_history import PairingHistory
from santapairing.models.pairing_result import MatchStep
from santapairing.pairing.assign import assign_pairs
from santapairing.utils import set_verbose_logging, setup_logger
from santapairing.validation.checker import create_pairing_validator

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def parse_bool(value: str) -> bool:
    """Parse a true/false command-line value.

    Raises:
        argparse.ArgumentTypeError: If the value is not a known spelling

    Examples:
        >>> parse_bool("True")
        True
        >>> parse_bool("no")
        False
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(
        f"Invalid boolean '{value}'. Use true or false"
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1 (got {number})")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="santa-pairing",
        description="Generate Secret Santa assignments",
        epilog="Example: santa-pairing names.txt assignments.txt true false",
    )

    parser.add_argument(
        "names_file",
        nargs="?",
        default=DEFAULT_NAMES_FILE,
        help=f"Names file, one group per line (default: {DEFAULT_NAMES_FILE})",
    )
    parser.add_argument(
        "assignments_file",
        nargs="?",
        default=DEFAULT_ASSIGNMENTS_FILE,
        help=(
            "Assignments file; read for history and appended to "
            f"(default: {DEFAULT_ASSIGNMENTS_FILE})"
        ),
    )
    parser.add_argument(
        "check_previous",
        nargs="?",
        type=parse_bool,
        help="Avoid recipients from previous assignments (default: true)",
    )
    parser.add_argument(
        "allow_reciprocal",
        nargs="?",
        type=parse_bool,
        help="Allow A->B and B->A in the same draw (default: false)",
    )
    parser.add_argument(
        "verbose",
        nargs="?",
        type=parse_bool,
        help="Print every pairing step (default: false)",
    )

    # Search options
    parser.add_argument(
        "--attempts",
        dest="max_attempts",
        type=_positive_int,
        help="Number of reshuffles before giving up (default: 1000)",
    )
    parser.add_argument(
        "--max-steps",
        type=_positive_int,
        help="Bound on pairing steps per attempt (default: 100 x participants squared)",
    )
    parser.add_argument(
        "--seed", type=int, help="Random seed for a reproducible draw"
    )
    parser.add_argument(
        "--lookback",
        type=_positive_int,
        help="Only avoid recipients from the last N runs (default: all runs)",
    )

    # Run options
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Ask for the options and confirm before writing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the assignments instead of writing them",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def load_configuration(config_file: Optional[str]) -> dict:
    """Load configuration from JSON file.

    Args:
        config_file: Path to configuration file

    Returns:
        Configuration dictionary (empty without a file)

    Raises:
        InvalidConfigurationException: Missing file or invalid JSON
    """
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        raise InvalidConfigurationException(
            f"Configuration file not found: {config_file}"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigurationException(
            f"Failed to load configuration: {e}"
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigurationException(
            "Configuration file must contain a JSON object"
        )
    logger.info("Loaded configuration from: %s", config_file)
    return config


def build_config(args: argparse.Namespace) -> PairingConfig:
    """Combine defaults, the config file and command-line values.

    Command-line values win over the config file.
    """
    config = PairingConfig.from_dict(load_configuration(args.config))
    return config.merged(
        check_previous=args.check_previous,
        allow_reciprocal=args.allow_reciprocal,
        verbose=args.verbose,
        max_attempts=args.max_attempts,
        max_steps=args.max_steps,
        seed=args.seed,
        lookback=args.lookback,
    )


def _create_session() -> PromptSession:
    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )
    return PromptSession(
        completer=WordCompleter(["true", "false"]),
        history=InMemoryHistory(),
        style=style,
    )


def prompt_for_options(
    config: PairingConfig, session: Optional[PromptSession] = None
) -> PairingConfig:
    """Ask for the two pairing flags, offering the current values as defaults."""
    session = session or _create_session()
    validator = Validator.from_callable(
        lambda text: text.strip().lower() in TRUE_VALUES + FALSE_VALUES,
        error_message="Please enter a valid option (true or false)",
        move_cursor_to_end=True,
    )

    check = session.prompt(
        "Check previous assignments: ",
        default=str(config.check_previous).lower(),
        validator=validator,
    )
    reciprocal = session.prompt(
        "Allow reciprocal assignments: ",
        default=str(config.allow_reciprocal).lower(),
        validator=validator,
    )
    return config.merged(
        check_previous=parse_bool(check),
        allow_reciprocal=parse_bool(reciprocal),
    )


def render_step(step: MatchStep) -> str:
    """Format one engine step.

    The chosen recipient is green and recipients ruled out for this giver are
    red. On a dead end the whole pool is red.
    """
    if step.is_dead_end:
        pool = ", ".join(step.available)
        return f"Giver: {step.giver}. Recipients: {Colors.FAIL}{pool}{Colors.ENDC}"

    allowed = set(step.candidates)
    names = []
    for name in step.available:
        if name == step.recipient:
            names.append(f"{Colors.OKGREEN}{name}{Colors.ENDC}")
        elif name not in allowed:
            names.append(f"{Colors.FAIL}{name}{Colors.ENDC}")
        else:
            names.append(name)
    return f"Giver: {step.giver}. Recipients: {', '.join(names)}"


def print_step(step: MatchStep) -> None:
    print(render_step(step))


def print_settings(args: argparse.Namespace, config: PairingConfig) -> None:
    print(f"Names File: {args.names_file}")
    print(f"Previous Assignments File: {args.assignments_file}")
    print(f"Check Previous Assignments: {config.check_previous}")
    print(f"Allow Reciprocal: {config.allow_reciprocal}")
    print(f"Verbose Output: {config.verbose}")
    if config.seed is not None:
        print(f"Seed: {config.seed}")


def run_pairing(args: argparse.Namespace) -> int:
    """Run one draw based on CLI arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = build_config(args)
    if args.interactive:
        config = prompt_for_options(config)
    if config.verbose:
        print_settings(args, config)

    roster = load_roster(args.names_file)

    history = PairingHistory()
    if config.check_previous:
        history = read_previous_pairs(
            args.assignments_file, lookback=config.lookback
        ).restricted_to(roster.participants)

    result = assign_pairs(
        roster.participants,
        roster.groups,
        history,
        allow_reciprocal=config.allow_reciprocal,
        max_attempts=config.max_attempts,
        rng=random.Random(config.seed),
        max_steps=config.max_steps,
        on_step=print_step if config.verbose else None,
    )

    report = create_pairing_validator().validate(
        result.pairs,
        participants=roster.participants,
        groups=roster.groups,
        history=history,
        allow_reciprocal=config.allow_reciprocal,
    )
    if not report:
        print(f"{Colors.FAIL}Generated draw is invalid: {report.summary}{Colors.ENDC}")
        return 1

    if args.dry_run:
        print(format_assignments(result.pairs), end="")
        return 0

    if args.interactive and not confirm(
        f"Write {len(result.pairs)} assignments to {args.assignments_file}?"
    ):
        print(f"{Colors.WARNING}Nothing written{Colors.ENDC}")
        return 0

    path = write_assignments(args.assignments_file, result.pairs)
    print(
        f"{Colors.OKGREEN}Assignments have been generated successfully "
        f"({path}){Colors.ENDC}"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.debug:
        set_verbose_logging()

    try:
        return run_pairing(args)
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted by user")
        return 130
    except SantaPairingException as e:
        logger.debug("Pairing failed", exc_info=True)
        print(f"{Colors.FAIL}{e}{Colors.ENDC}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
