"""
Platform adapters for the higher/lower engine.

This package provides adapters that translate between the core game engine
and various platforms (CLI, tests, simulations).
"""

from hilo.adapters.base import Decision, PlatformAdapter
from hilo.adapters.cli import CLIAdapter
from hilo.adapters.dummy import DummyAdapter

__all__ = ["Decision", "PlatformAdapter", "CLIAdapter", "DummyAdapter"]
