from __future__ import annotations

import json

import pytest

from medstock.cli import main


def test_demo_prints_text_report(capsys: pytest.CaptureFixture[str]):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "=== Paracetamol 500mg ===" in out
    assert "Batches:" in out


def test_demo_json_after_sale(capsys: pytest.CaptureFixture[str]):
    assert main(["demo", "--json", "--sell", "1", "50"]) == 0
    snapshot = json.loads(capsys.readouterr().out)

    paracetamol = snapshot[0]
    assert paracetamol["qty_available"] == 50
    assert [b["id"] for b in paracetamol["batches"]] == [2]


def test_demo_failed_sale_exit_code(capsys: pytest.CaptureFixture[str]):
    assert main(["demo", "--sell", "3", "1000"]) == 1
    assert main(["demo", "--sell", "42", "1"]) == 1


def test_menu_command(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    answers = iter(["6", "0"])
    monkeypatch.setenv("MEDSTOCK_PAUSE_AFTER_ACTION", "false")
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(["menu"]) == 0
    assert "No medicines registered." in capsys.readouterr().out


def test_command_required():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
