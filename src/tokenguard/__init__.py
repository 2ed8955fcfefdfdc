"""tokenguard - design token enforcement for stylesheet values."""

__version__ = "0.1.0"
