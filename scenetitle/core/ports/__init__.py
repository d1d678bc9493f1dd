"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports parsing :
- ITitleParser : Extraction des metadonnees d'un nom de release
"""

from scenetitle.core.ports.parser import ITitleParser

__all__ = [
    "ITitleParser",
]
