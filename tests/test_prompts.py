from __future__ import annotations

from datetime import date

import pytest

from medstock.console.prompts import Prompter


def _prompter(scripted_input, answers, output):
    return Prompter(input_fn=scripted_input(answers), output_fn=output.append)


def test_read_int_retries_until_in_range(scripted_input, output_lines):
    prompter = _prompter(scripted_input, ["abc", "12", " 4 "], output_lines)

    assert prompter.read_int("n: ", 0, 10) == 4
    assert output_lines == [
        "Invalid value! Type digits only.",
        "Try again.",
        "Invalid value. The number must be between 0 and 10.",
        "Try again.",
    ]


def test_read_int_bounds_are_inclusive(scripted_input, output_lines):
    prompter = _prompter(scripted_input, ["1", "5"], output_lines)
    assert prompter.read_int("n: ", 1, 5) == 1
    assert prompter.read_int("n: ", 1, 5) == 5
    assert output_lines == []


def test_read_int_propagates_end_of_input(scripted_input, output_lines):
    prompter = _prompter(scripted_input, [], output_lines)
    with pytest.raises(EOFError):
        prompter.read_int("n: ")


@pytest.mark.parametrize(
    ("year", "month", "max_day"),
    [
        ("2028", "2", 29),
        ("2027", "2", 28),
        ("2100", "2", 28),
        ("2400", "2", 29),
        ("2026", "4", 30),
        ("2026", "12", 31),
    ],
)
def test_read_date_honors_days_in_month(scripted_input, output_lines, year, month, max_day):
    prompter = _prompter(scripted_input, [year, month, str(max_day + 1), str(max_day)], output_lines)

    result = prompter.read_date(2025, 2999)

    assert result == date(int(year), int(month), max_day)
    assert output_lines[0] == f"Invalid value. The number must be between 1 and {max_day}."


def test_read_date_rejects_year_below_floor(scripted_input, output_lines):
    prompter = _prompter(scripted_input, ["2024", "2025", "1", "1"], output_lines)
    assert prompter.read_date(2025, 2999) == date(2025, 1, 1)
    assert "between 2025 and 2999" in output_lines[0]


def test_read_text_requires_value(scripted_input, output_lines):
    prompter = _prompter(scripted_input, ["", "   ", " Medley "], output_lines)
    assert prompter.read_text("lab: ") == "Medley"
    assert output_lines.count("A value is required. Try again.") == 2
