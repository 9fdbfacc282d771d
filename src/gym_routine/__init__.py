"""gym-routine: multi-week gym routines built from a muscle-group selection."""

__version__ = "0.1.0"
