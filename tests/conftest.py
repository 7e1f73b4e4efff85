from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable

import pytest

from medstock.core.config import Settings, get_settings
from medstock.domain.inventory import MedicineRegistry

NOW = datetime(2026, 3, 15, 10, 30)


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def past_day() -> date:
    return date(2026, 1, 31)


@pytest.fixture()
def future_day() -> date:
    return date(2026, 12, 31)


@pytest.fixture()
def registry() -> MedicineRegistry:
    return MedicineRegistry()


@pytest.fixture()
def settings() -> Settings:
    return Settings(pause_after_action=False, min_expiry_year=2025, max_expiry_year=2999, max_input_int=999)


@pytest.fixture()
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input() replacement that replays answers, then raises EOFError."""

    def factory(answers: Iterable[str]) -> Callable[[str], str]:
        queue = list(answers)
        prompts: list[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        fake_input.prompts = prompts  # type: ignore[attr-defined]
        return fake_input

    return factory


@pytest.fixture()
def output_lines() -> list[str]:
    return []
