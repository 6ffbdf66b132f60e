"""Props validation, context values, lifecycle hooks, update scheduling and event delegation for UI trees."""

__version__ = "0.1.10"

__all__ = [
    "props",
    "context",
    "events",
    "hooks",
    "delegation",
]