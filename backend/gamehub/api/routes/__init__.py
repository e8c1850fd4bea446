"""Route modules for the Game Hub API."""
from . import auth, history

__all__ = ["auth", "history"]
