"""Shared fixtures for the mobfight tests."""

from collections.abc import Callable, Iterator

import pytest

from mobfight.config import Settings, clear_settings_cache


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Reset the settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def outbox() -> list[str]:
    """Collects every line a session sends."""
    return []


@pytest.fixture
def lines() -> Callable[[list[str]], Callable[[], str]]:
    """Build a read_line callable that replays the given lines, then hits EOF."""

    def make(inputs: list[str]) -> Callable[[], str]:
        it = iter(inputs)

        def read_line() -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError

        return read_line

    return make
