"""An ls-style directory lister with recursive, long, hidden, reverse and time-ordered modes, plus small text helpers."""

__version__ = "0.1.0"