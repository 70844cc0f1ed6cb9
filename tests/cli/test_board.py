"""Tests for 'kandown board' commands."""

import json
from argparse import Namespace

import pytest

from kandown.cli.board import board_get, board_summary
from kandown.parser import parse_document


def test_board_summary(board_file, capsys):
    args = Namespace(file=str(board_file), json=False)
    assert board_summary(args) == 0

    out = capsys.readouterr().out
    assert str(board_file) in out
    assert "Status" in out
    assert "Backlog, In Progress, Done" in out
    assert "Board View" in out
    assert "by Status" in out
    assert "3 cards" in out


def test_board_summary_json(board_file, capsys):
    args = Namespace(file=str(board_file), json=True)
    assert board_summary(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["cards"] == 3
    assert [p["name"] for p in data["properties"]] == ["Status", "Owner", "Due Date", "Shipped"]
    assert data["views"][0]["groupBy"] == "Status"


def test_board_summary_missing_file(tmp_path, capsys):
    args = Namespace(file=str(tmp_path / "missing.md"), json=False)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    assert "Cannot read" in capsys.readouterr().err


def test_board_summary_invalid_board(tmp_path, capsys):
    """Parse errors are reported with the line number."""
    path = tmp_path / "board.md"
    path.write_text("# Properties\n- Owner: Fancy\n")
    args = Namespace(file=str(path), json=True)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    data = json.loads(capsys.readouterr().err)
    assert "line 2: Unknown property type: Fancy" in data["error"]


def test_board_get(board_file, capsys, sample_markdown):
    args = Namespace(file=str(board_file), json=False)
    assert board_get(args) == 0

    out = capsys.readouterr().out
    assert parse_document(out) == parse_document(sample_markdown)


def test_board_get_json(board_file, capsys):
    args = Namespace(file=str(board_file), json=True)
    assert board_get(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["file"] == str(board_file)
    assert data["markdown"].startswith("# Properties\n")
