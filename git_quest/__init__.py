"""
git-quest - A simulated terminal for learning Git one timeline at a time
"""

from .__version__ import __version__
from .services.command_service import GitSimulator
from .services.objective_service import ObjectiveEvaluator

__all__ = ["GitSimulator", "ObjectiveEvaluator", "__version__"]
