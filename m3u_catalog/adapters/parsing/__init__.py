"""
Adaptateurs de parsing pour m3u-catalog.

Ce package contient la grammaire ligne a ligne du format .m3u etendu:
- match_directive: Reconnait une directive #EXTINF complete
- parse_metadata: Extrait les paires cle="valeur" des attributs bruts
"""

from m3u_catalog.adapters.parsing.directive_grammar import is_comment, match_directive
from m3u_catalog.adapters.parsing.metadata_parser import parse_metadata

__all__ = [
    "is_comment",
    "match_directive",
    "parse_metadata",
]
