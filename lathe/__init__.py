"""
Lathe - build automation task dispatcher.

Locates tasks by name, matches them against command line arguments and runs
them against a normalized project descriptor.
"""

__version__ = "1.4.0"
__author__ = "Lathe Team"

from lathe.core.dispatch import Dispatcher

__all__ = ["Dispatcher", "__version__"]
