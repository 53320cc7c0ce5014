"""Rule engine: cards, dealing, bidding, tricks, scoring and the game controller."""
