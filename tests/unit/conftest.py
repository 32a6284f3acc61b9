"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

import pytest

from autosymlink.api.alias.Aliases import Aliases
from tests.conftest import run_cmd, write_config

__all__ = ["run_cmd", "write_config"]


@pytest.fixture
def aliases_for(tmp_path):
    """Factory building an Aliases namespace over a fixed environment (HOME=tmp_path/h)."""

    def _build(values: dict | None = None, environ: dict | None = None) -> Aliases:
        env = {"HOME": str(tmp_path / "h"), "USER": "tester"} if environ is None else environ
        aliases = Aliases(environ=env, hostname="testhost")
        aliases.update(values or {})
        aliases.resolve_all()
        return aliases

    return _build
