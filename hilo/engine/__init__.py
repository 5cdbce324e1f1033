"""
Core engine for the higher/lower game.

This package provides the game engine that drives games through platform
adapters, implementing the game flow in a platform-agnostic way.
"""

from hilo.engine.base import GameEngine
from hilo.engine.higher_lower import HigherLowerEngine

__all__ = ["GameEngine", "HigherLowerEngine"]
