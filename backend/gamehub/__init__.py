"""Game Hub backend: player accounts and game score history."""
