"""Interactive console adapter."""

from .menu import MenuApp
from .prompts import Prompter

__all__ = ["MenuApp", "Prompter"]
