"""Shared pytest fixtures for user registry tests."""

from .core import *  # noqa: F401,F403
