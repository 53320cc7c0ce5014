"""Euchre AI package."""

from __future__ import annotations

from .engine.game import EuchreGame
from .engine.rules import load_rules

__all__ = ["EuchreGame", "load_rules"]
