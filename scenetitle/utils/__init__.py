"""
Utilitaires et constantes pour SceneTitle.

Ce module contient les constantes partagees par le parser.
"""

from scenetitle.utils.constants import (
    DIGITAL_FORMAT_ALIASES,
    DIGITAL_RESOLUTION_ALIASES,
    GROUP_SEPARATOR,
    GROUP_SITE_SEPARATOR,
    TOKEN_DELIMITERS,
)

__all__ = [
    "DIGITAL_FORMAT_ALIASES",
    "DIGITAL_RESOLUTION_ALIASES",
    "GROUP_SEPARATOR",
    "GROUP_SITE_SEPARATOR",
    "TOKEN_DELIMITERS",
]
