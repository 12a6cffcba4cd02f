"""Utilities."""

from .logger import GameDisplay, setup_logging, team_description

__all__ = ["GameDisplay", "setup_logging", "team_description"]
