"""SQLAlchemy models exposed for bootstrap and imports."""
from .history import PlayingHistory
from .user import DEFAULT_PROFILE_PIC, User

__all__ = ["User", "PlayingHistory", "DEFAULT_PROFILE_PIC"]
