"""Frontends that display and drive simulations."""

from .cli import CLIGameOfLife
from .text import render

__all__ = ["CLIGameOfLife", "render"]
