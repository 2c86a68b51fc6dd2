"""vibeset: turn a free-text vibe into a playlist concept."""

__version__ = "0.1.0"
