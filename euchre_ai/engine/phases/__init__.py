"""Per-hand phases driven by the game controller."""
