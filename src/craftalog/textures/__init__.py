"""
Textures package.

Resolves item ids to texture files in the resource pack and copies them
into the public asset folder.
"""

from .service import TextureService, candidate_names
from .models import ItemDetails, TextureKind, WOOD_TYPES, DERIVATIVE_SUFFIXES

__all__ = [
    "TextureService",
    "candidate_names",
    "ItemDetails",
    "TextureKind",
    "WOOD_TYPES",
    "DERIVATIVE_SUFFIXES",
]
