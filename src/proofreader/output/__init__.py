"""Result reporters."""

from .base import BaseReporter
from .console import ConsoleReporter
from .json import JsonReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JsonReporter",
]
