from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

import jinja2
import pytest

import tmplkit.config.settings as settings_mod
from tmplkit import new_engine, render_template


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    # Settings are memoized from the process env; isolate every test
    for key in (
        settings_mod.ENV_GITIGNORE_API_URL,
        settings_mod.ENV_HTTP_TIMEOUT,
        settings_mod.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(key, raising=False)
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture
def engine() -> jinja2.Environment:
    return new_engine()


def assert_helpers(
    env: jinja2.Environment, value: Any, expected: Iterable[Tuple[str, str]]
) -> None:
    """Render ``{{ helper(var) }}`` for each pair and compare the output."""
    context: Dict[str, Any] = {"var": value}
    for helper, want in expected:
        got = render_template(env, f"{{{{ {helper}(var) }}}}", context)
        assert got == want, f"{helper}({value!r}) -> {got!r}, expected {want!r}"
