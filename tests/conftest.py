"""Global test configuration for linewrap tests."""

import pytest
import structlog

from linewrap import TextWrapper


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test (or the CLI) installed."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep host environment and stray config files out of settings."""
    import os

    for var in list(os.environ):
        if var.startswith("LINEWRAP_") or var in ("LOG_FORMAT", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def wrapper():
    """A wrapper at width 45, the starting point of most tests."""
    return TextWrapper(width=45)


@pytest.fixture
def check_wrap():
    """Assert that wrapping ``text`` at ``width`` gives ``expect``."""
    from linewrap import wrap

    def _check(text, width, expect, **options):
        result = wrap(text, width, **options)
        assert result == expect, (
            f"width={width} options={options}\nexpected {expect!r}\n     got {result!r}"
        )

    return _check


@pytest.fixture
def check_split():
    """Assert that the default wrapper splits ``text`` into ``expect``."""

    def _check(text, expect, **options):
        result = TextWrapper(**options).split_chunks(text)
        assert result == expect, f"expected {expect!r}\n     got {result!r}"

    return _check
