"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- DigitalFormat : Source de distribution (BluRay, HDTV, WEB-DL, UHDTV)
- DigitalResolution : Classe de resolution (1080p, 720p, 4K)
- MediaInfo : Informations extraites d'un nom de release
"""

from scenetitle.core.value_objects.media_info import (
    DigitalFormat,
    DigitalResolution,
    MediaInfo,
)

__all__ = [
    "DigitalFormat",
    "DigitalResolution",
    "MediaInfo",
]
