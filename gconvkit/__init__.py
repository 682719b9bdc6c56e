"""Empty and kind checks, string helpers, switchable locks, a replayable reader and dataclass field tags."""

__version__ = "0.1.0"

__all__ = ["empty", "kinds", "locks", "readcloser", "strutil", "structs"]