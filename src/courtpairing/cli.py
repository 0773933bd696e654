"""Command-line interface for Court Pairing.

Subcommands:
- schedule: generate a schedule and print or save it
- estimate: suggest a round count for a configuration
- check: validate a saved schedule file
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
import json
from pathlib import Path
from typing import Any, Dict, List

from courtpairing.constants import (
    DEFAULT_MODE,
    MODE_FIXED,
    PAIRING_MODES,
    SCHEDULE_FILE_EXTENSION,
)
from courtpairing.controllers.schedule import generate_schedule
from courtpairing.exceptions import CourtPairingException, ScheduleFileException
from courtpairing.models.schedule import Round
from courtpairing.models.tournament import ScheduleConfig
from courtpairing.pairing import estimate_rounds
from courtpairing.utils import format_schedule, setup_logger
from courtpairing.validation import ScheduleValidator, ValidationReport

logger = setup_logger(__name__)


def parse_names(value: str) -> List[str]:
    """Parse a comma separated list of player names.

    Raises:
        argparse.ArgumentTypeError: If a name is blank or repeated
    """
    names = [part.strip() for part in value.split(",")]
    if any(not name for name in names):
        raise argparse.ArgumentTypeError(f"Blank name in '{value}'")
    if len(set(names)) != len(names):
        raise argparse.ArgumentTypeError(f"Duplicate names in '{value}'")
    return names


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {number}")
    return number


def _player_ids(args: argparse.Namespace) -> List[str]:
    if args.names:
        return list(args.names)
    return [f"P{i}" for i in range(1, args.players + 1)]


def schedule_to_dict(
    config: ScheduleConfig, player_ids: List[str], rounds: List[Round]
) -> Dict[str, Any]:
    """Serialize a generated schedule with the inputs that produced it."""
    return {
        "config": config.to_dict(),
        "players": list(player_ids),
        "rounds": [r.to_dict() for r in rounds],
    }


def load_schedule_file(path: Path) -> Dict[str, Any]:
    """Read a schedule file written by ``schedule --output``.

    Raises:
        ScheduleFileException: If the file is missing or malformed
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return {
            "config": ScheduleConfig.from_dict(data["config"]),
            "players": [str(pid) for pid in data["players"]],
            "rounds": [Round.from_dict(r) for r in data["rounds"]],
        }
    except OSError as e:
        raise ScheduleFileException(f"Cannot read {path}: {e}") from e
    except (ValueError, KeyError, TypeError, CourtPairingException) as e:
        raise ScheduleFileException(f"Malformed schedule file {path}: {e}") from e


def print_report(report: ValidationReport) -> None:
    print(f"\nValidation: {report.summary}")
    print(f"  Compliance: {report.compliance_percentage:.1f}%")
    for result in report.violations + report.quality_warnings:
        print(f"  [{result.violation_type.value}] {result.check}: {result.description}")


def run_schedule_command(args: argparse.Namespace) -> int:
    """Run the schedule command."""
    player_ids = _player_ids(args)
    config = ScheduleConfig(
        num_courts=args.courts,
        mode=args.mode,
        num_rounds=args.rounds,
        seed=args.seed,
    )
    try:
        rounds = generate_schedule(player_ids, config)
    except CourtPairingException as e:
        print(f"Error: {e}")
        return 1

    if not rounds:
        requirement = "at least 4 players"
        if args.mode == MODE_FIXED:
            requirement += ", an even number of them,"
        print(f"No schedule: need {requirement} and at least one court")
        return 1

    if args.output:
        output_path = Path(args.output)
        if not output_path.suffix:
            output_path = output_path.with_suffix(SCHEDULE_FILE_EXTENSION)
        payload = schedule_to_dict(config, player_ids, rounds)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Schedule saved to: {output_path}")

    if args.format == "json":
        print(json.dumps(schedule_to_dict(config, player_ids, rounds), indent=2))
    else:
        print(format_schedule(rounds))

    if args.validate:
        report = ScheduleValidator().validate(rounds, player_ids, args.mode)
        print_report(report)
        return 0 if report.is_valid else 1
    return 0


def run_estimate_command(args: argparse.Namespace) -> int:
    """Run the estimate command."""
    estimate = estimate_rounds(args.players, args.courts, args.mode)
    print(f"{estimate.rounds} rounds: {estimate.description}")
    return 0 if estimate.rounds else 1


def run_check_command(args: argparse.Namespace) -> int:
    """Run the check command."""
    try:
        data = load_schedule_file(Path(args.file))
    except ScheduleFileException as e:
        print(f"Error: {e}")
        logger.error(str(e))
        return 1

    config: ScheduleConfig = data["config"]
    report = ScheduleValidator(max_games_spread=args.max_spread).validate(
        data["rounds"], data["players"], config.mode
    )
    print_report(report)
    return 0 if report.is_valid else 1


def add_schedule_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--players", type=positive_int, default=8, help="Number of players (default: 8)"
    )
    group.add_argument(
        "--names", type=parse_names, help="Comma separated player names"
    )
    parser.add_argument(
        "--courts", type=positive_int, default=2, help="Number of courts (default: 2)"
    )
    parser.add_argument("--mode", choices=PAIRING_MODES, default=DEFAULT_MODE)
    parser.add_argument("--rounds", type=positive_int, help="Cap on rounds")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--output", help="JSON file to write the schedule to (.json added if missing)"
    )
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument("--validate", action="store_true", help="Check the schedule")


def add_estimate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=positive_int, required=True)
    parser.add_argument("--courts", type=positive_int, required=True)
    parser.add_argument("--mode", choices=PAIRING_MODES, default=DEFAULT_MODE)


def add_check_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", required=True, help="Schedule JSON file")
    parser.add_argument(
        "--max-spread",
        type=int,
        default=1,
        help="Allowed gap in games played (default: 1)",
    )


def create_schedule_parser() -> argparse.ArgumentParser:
    """Create parser for schedule subcommand."""
    parser = argparse.ArgumentParser(prog="schedule", description="Generate a schedule")
    add_schedule_arguments(parser)
    return parser


def create_estimate_parser() -> argparse.ArgumentParser:
    """Create parser for estimate subcommand."""
    parser = argparse.ArgumentParser(prog="estimate", description="Suggest a round count")
    add_estimate_arguments(parser)
    return parser


def create_check_parser() -> argparse.ArgumentParser:
    """Create parser for check subcommand."""
    parser = argparse.ArgumentParser(prog="check", description="Validate a schedule file")
    add_check_arguments(parser)
    return parser


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top level parser with every subcommand."""
    parser = argparse.ArgumentParser(
        prog="court-pairing",
        description="Round-robin doubles scheduling",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Start interactive mode"
    )
    subparsers = parser.add_subparsers(dest="command")

    sched_parser = subparsers.add_parser("schedule", help="Generate a schedule")
    add_schedule_arguments(sched_parser)
    sched_parser.set_defaults(func=run_schedule_command)

    est_parser = subparsers.add_parser("estimate", help="Suggest a round count")
    add_estimate_arguments(est_parser)
    est_parser.set_defaults(func=run_estimate_command)

    check_parser = subparsers.add_parser("check", help="Validate a schedule file")
    add_check_arguments(check_parser)
    check_parser.set_defaults(func=run_check_command)

    return parser
