"""
project: delve
module: __init__.py
License: MIT

Room-graph dungeon generator.

The ``delve.dungeon`` package grows a traversable graph of room blueprints
from a single entrance, orienting each room relative to the door it was
entered through. ``run.py`` at the repository root exposes a small CLI.
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
