"""Proofreading orchestration."""

from .proofreader import Proofreader

__all__ = [
    "Proofreader",
]
