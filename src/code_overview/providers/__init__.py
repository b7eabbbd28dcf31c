"""Corpus providers: what the scan engine is fed."""

from .files import FileCorpusProvider
from .types import DeclarationTypeProvider

__all__ = ["FileCorpusProvider", "DeclarationTypeProvider"]
