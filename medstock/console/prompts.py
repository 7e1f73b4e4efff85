"""Validated console input.

Each prompt loops until the user types an acceptable value. Input and output
callables are injectable so scripted input can drive them.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class Prompter:
    def __init__(self, input_fn: InputFn | None = None, output_fn: OutputFn | None = None):
        self._input = input_fn or input
        self._output = output_fn or print

    def read_int(self, message: str, min_value: int = 0, max_value: int = 999) -> int:
        while True:
            raw = self._input(message).strip()
            try:
                value = int(raw)
            except ValueError:
                self._output("Invalid value! Type digits only.")
            else:
                if min_value <= value <= max_value:
                    return value
                self._output(f"Invalid value. The number must be between {min_value} and {max_value}.")
            self._output("Try again.")

    def read_date(self, min_year: int, max_year: int) -> date:
        year = self.read_int("Expiry year: ", min_year, max_year)
        month = self.read_int("Expiry month: ", 1, 12)
        max_day = calendar.monthrange(year, month)[1]
        day = self.read_int("Expiry day: ", 1, max_day)
        return date(year, month, day)

    def read_text(self, message: str) -> str:
        while True:
            value = self._input(message).strip()
            if value:
                return value
            self._output("A value is required. Try again.")
