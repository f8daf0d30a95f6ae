"""Utilities: clock, exceptions and logging."""
