"""Map loading and validation for a collect-and-exit grid puzzle game, with small text helpers."""

__version__ = "0.1.0"