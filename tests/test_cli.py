import argparse
import json
import os
import subprocess
import sys

import pytest

from courtpairing.__main__ import execute_line, main
from courtpairing.cli import load_schedule_file, parse_names, positive_int
from courtpairing.exceptions import ScheduleFileException


def test_schedule_command_prints_and_validates(capsys):
    code = main(["schedule", "--players", "8", "--courts", "2", "--seed", "3", "--validate"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Round 1" in out
    assert "Court 2:" in out
    assert "Validation:" in out


def test_schedule_with_names(capsys):
    code = main(["schedule", "--names", "Ann,Bo,Cy,Di", "--courts", "1", "--seed", "1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Ann" in out
    assert "Round 3" in out
    assert "Round 4" not in out


def test_schedule_too_few_players(capsys):
    assert main(["schedule", "--players", "3"]) == 1
    assert "No schedule" in capsys.readouterr().out


def test_fixed_schedule_needs_even_roster(capsys):
    assert main(["schedule", "--players", "5", "--mode", "fixed"]) == 1
    assert "even number" in capsys.readouterr().out


def test_saved_schedule_can_be_checked(tmp_path, capsys):
    path = tmp_path / "schedule.json"

    assert main(
        ["schedule", "--players", "10", "--courts", "2", "--mode", "fixed", "--output", str(path)]
    ) == 0
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["config"]["mode"] == "fixed"
    assert len(saved["rounds"]) == 5

    assert main(["check", "--file", str(path)]) == 0
    assert "all checks passed" in capsys.readouterr().out


def test_check_reports_broken_schedule(tmp_path, capsys):
    path = tmp_path / "schedule.json"
    main(["schedule", "--players", "8", "--mode", "fixed", "--output", str(path)])
    data = json.loads(path.read_text(encoding="utf-8"))
    data["rounds"] = data["rounds"][:1]
    path.write_text(json.dumps(data), encoding="utf-8")

    assert main(["check", "--file", str(path)]) == 1
    assert "matchup_coverage" in capsys.readouterr().out


def test_check_missing_file(tmp_path, capsys):
    assert main(["check", "--file", str(tmp_path / "nope.json")]) == 1
    assert "Error:" in capsys.readouterr().out


def test_load_schedule_file_rejects_garbage(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"rounds": []}', encoding="utf-8")

    with pytest.raises(ScheduleFileException):
        load_schedule_file(path)


def test_json_format_is_the_only_stdout():
    env = dict(os.environ)
    env.pop("COURT_PAIRING_LOG_LEVEL", None)
    env.pop("COURT_PAIRING_LOG_DIR", None)

    proc = subprocess.run(
        [
            sys.executable,
            "-m",
            "courtpairing",
            "schedule",
            "--players",
            "4",
            "--courts",
            "1",
            "--seed",
            "1",
            "--format",
            "json",
        ],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    data = json.loads(proc.stdout)
    assert data["players"] == ["P1", "P2", "P3", "P4"]
    assert len(data["rounds"]) == 3
    assert data["config"]["seed"] == 1


def test_estimate_command(capsys):
    assert main(["estimate", "--players", "8", "--courts", "2"]) == 0
    assert "10 rounds" in capsys.readouterr().out

    assert main(["estimate", "--players", "8", "--courts", "2", "--mode", "fixed"]) == 0
    assert "3 rounds" in capsys.readouterr().out


def test_estimate_requires_arguments():
    with pytest.raises(SystemExit):
        main(["estimate", "--players", "8"])


def test_parse_names():
    assert parse_names(" Ann, Bo ,Cy") == ["Ann", "Bo", "Cy"]
    with pytest.raises(argparse.ArgumentTypeError):
        parse_names("Ann,,Bo")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_names("Ann,Ann")


def test_positive_int():
    assert positive_int("3") == 3
    for bad in ("0", "-2", "two"):
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(bad)


def test_interactive_lines(capsys):
    assert execute_line("exit") is False
    assert execute_line("/exit") is False
    assert execute_line("/help") is True
    assert "Available Commands" in capsys.readouterr().out

    assert execute_line("help schedule") is True
    assert "--courts" in capsys.readouterr().out

    assert execute_line("estimate --players 6 --courts 1 --mode fixed") is True
    assert "3 rounds" in capsys.readouterr().out

    assert execute_line("estimate --players") is True
    assert execute_line("nonsense") is True
    assert "Unknown command" in capsys.readouterr().out


def test_output_gets_json_extension(tmp_path):
    assert main(["schedule", "--players", "4", "--courts", "1", "--output", str(tmp_path / "night")]) == 0
    assert (tmp_path / "night.json").exists()
