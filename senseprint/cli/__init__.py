"""Command line interface for SensePrint."""

from .main import app, run

__all__ = ["app", "run"]
