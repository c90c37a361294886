"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "setgame",
        "setgame.cards",
        "setgame.encoding",
        "setgame.rules",
        "setgame.session",
        "setgame.selection",
        "setgame.autoplay",
        "setgame.cli.main",
        "setgame.cli.textual",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
