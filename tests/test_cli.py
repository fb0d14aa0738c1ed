# tests/test_cli.py

import os

import pytest

import cli.menu_helpers as helpers
from cli.main import parse_args
from cli.menu_helpers import MenuSignal
from cli.menus import calculations_menu, reports_menu, students_menu
from cli.path_utils import ensure_parent_dir, resolve_roster_path
from core.response import ErrorCode, Response


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _: next(answers))


# === menu helpers ===


def test_display_menu_returns_selected_action(monkeypatch, capsys):
    action = lambda: None
    feed_input(monkeypatch, "7", "-1", "1")

    assert helpers.display_menu("Title", [("Do it", action)]) is action
    assert capsys.readouterr().out.count("Invalid selection") == 2


def test_display_menu_zero_exits(monkeypatch):
    feed_input(monkeypatch, "0")

    assert helpers.display_menu("Title", [("Do it", print)]) is MenuSignal.EXIT


def test_prompt_int_input_retries_until_integer(monkeypatch):
    feed_input(monkeypatch, "ninety", "90")

    assert helpers.prompt_int_input_or_cancel("Grade:") == 90


def test_prompt_int_input_blank_cancels(monkeypatch):
    feed_input(monkeypatch, "")

    assert helpers.prompt_int_input_or_cancel("Grade:") is MenuSignal.CANCEL


def test_display_response_failure(capsys):
    helpers.display_response_failure(
        Response.fail(detail="nope", error=ErrorCode.NOT_FOUND)
    )

    assert "[ERROR: NOT_FOUND] nope" in capsys.readouterr().out


def test_prompt_if_dirty_saves(sample_roster, monkeypatch, tmp_path):
    path = str(tmp_path / "nested" / "roster.txt")
    sample_roster.path = path
    feed_input(monkeypatch, "y")

    helpers.prompt_if_dirty(sample_roster)

    assert os.path.exists(path)
    assert not sample_roster.has_unsaved_changes


# === menus ===


def test_add_grade_menu(sample_roster, monkeypatch, capsys):
    feed_input(monkeypatch, "Grace", "Hopper", "x", "100")

    students_menu.add_grade(sample_roster)

    assert sample_roster.find_student("Grace", "Hopper").data["record"].grades == [85, 100]
    assert "Grade 100 successfully recorded" in capsys.readouterr().out


def test_add_grade_menu_unknown_student(sample_roster, monkeypatch, capsys):
    feed_input(monkeypatch, "Alan", "Kay", "50")

    students_menu.add_grade(sample_roster)

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_print_report(sample_roster, capsys):
    reports_menu.print_report(sample_roster, "average")

    assert "Ada Lovelace: average 80.00" in capsys.readouterr().out


def test_print_top_scorers(sample_roster, capsys):
    calculations_menu.print_top_scorers(sample_roster)

    out = capsys.readouterr().out
    assert "-Students with the highest grade" in out
    assert "---Ada Lovelace" in out
    assert "---Alan Turing" in out


def test_print_visit_reports_skipped(sample_roster, capsys):
    sample_roster.add_student("Paul", "Atreides")

    calculations_menu.print_visit(sample_roster, "highest")

    out = capsys.readouterr().out
    assert "Grace Hopper: highest grade 85" in out
    assert "[ERROR: EMPTY_DATA]" in out


def test_view_student_detail_with_huge_grade(sample_roster, monkeypatch, capsys):
    huge = int("9" * 400)
    sample_roster.add_grade("Grace", "Hopper", huge)
    feed_input(monkeypatch, "Grace", "Hopper")

    students_menu.view_student_detail(sample_roster)

    out = capsys.readouterr().out
    assert "... Name: Grace Hopper" in out
    assert f"... Average: {(85 + huge) // 2}." in out


def test_print_report_unknown_strategy(sample_roster, capsys):
    reports_menu.print_report(sample_roster, "pie")

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_print_visit_unknown_visitor(sample_roster, capsys):
    calculations_menu.print_visit(sample_roster, "median")

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


# === configuration ===


def test_parse_args_defaults():
    args = parse_args([])

    assert args.file is None
    assert args.log_level == "WARNING"


def test_parse_args_normalizes_log_level():
    args = parse_args(["--file", "class.txt", "--log-level", "debug"])

    assert args.file == "class.txt"
    assert args.log_level == "DEBUG"


def test_parse_args_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "chatty"])


def test_resolve_roster_path_default():
    expected = os.path.join(os.path.expanduser("~"), "Documents", "Rosters", "roster.txt")

    assert resolve_roster_path(None) == expected
    assert resolve_roster_path("   ") == expected


def test_resolve_roster_path_expands_user():
    assert resolve_roster_path("~/class.txt") == os.path.join(
        os.path.expanduser("~"), "class.txt"
    )


def test_ensure_parent_dir(tmp_path):
    target = tmp_path / "a" / "b" / "roster.txt"

    ensure_parent_dir(str(target))

    assert target.parent.is_dir()
