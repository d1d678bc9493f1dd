"""
Adaptateurs de parsing pour SceneTitle.

Ce package contient les implementations concretes des interfaces de parsing:
- SceneTitleParser: Parse les noms de release selon les conventions scene
"""

from scenetitle.adapters.parsing.scene_parser import SceneTitleParser, parse_title

__all__ = [
    "SceneTitleParser",
    "parse_title",
]
