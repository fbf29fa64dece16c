"""Shared pytest fixtures and test helpers for psplay tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from psplay.domain.command import CommandEnvelope


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory so no psplay.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("PSPLAY_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def wire(envelope: CommandEnvelope) -> dict[str, Any]:
    """The ``descriptor`` half of an envelope's wire form."""
    return envelope.to_wire()["descriptor"]


def target_ref(domain: str) -> dict[str, Any]:
    """Wire form of the targeted instance of *domain*."""
    return {"_ref": domain, "_enum": "ordinal", "_value": "targetEnum"}
