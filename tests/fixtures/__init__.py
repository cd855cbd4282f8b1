"""Shared pytest fixtures for the data-access tests."""

from .core import *  # noqa: F401,F403
