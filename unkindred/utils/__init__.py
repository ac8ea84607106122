"""Utilities: logging setup, message log, replay trace."""
