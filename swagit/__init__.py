"""
swagit - Switch, delete and sync git branches from the terminal
"""

from .__version__ import __version__
from .core import Swagit
from .cli.main import main

__all__ = ["Swagit", "main", "__version__"]
