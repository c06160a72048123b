from __future__ import annotations

from .corpus import generate_documents

__all__ = ["generate_documents"]
