"""Seat controllers: computer players and adapters for outside callers."""

from __future__ import annotations

from .ai_player import AIPlayer
from .base import BidContext, PlayContext, Player
from .callback_player import CallbackPlayer
from .random_player import RandomPlayer

__all__ = ["AIPlayer", "BidContext", "CallbackPlayer", "PlayContext", "Player", "RandomPlayer"]
