"""Interfaces for collaborators of the alignment engine."""

from .editor import ITextEditor

__all__ = ["ITextEditor"]
