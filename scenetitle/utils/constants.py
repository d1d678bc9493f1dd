"""
Constantes globales pour SceneTitle.

Ce module contient les tables en lecture seule utilisees par le parser:
- Delimiteurs de tokens
- Separateurs du groupe de release
- Regles de reconnaissance des annees
- Alias des sources et des resolutions (ordre explicite, pas de dict)

Les tables sont construites une seule fois a l'import et ne sont jamais modifiees.
"""

from scenetitle.core.value_objects.media_info import DigitalFormat, DigitalResolution

# Delimiteurs entre tokens d'un nom de release
TOKEN_DELIMITERS = frozenset({".", " "})

# Le groupe suit le dernier tiret du dernier token ("x264-GROUP")
GROUP_SEPARATOR = "-"
# Convention "TAG-GROUP@SITE" : on garde ce qui suit le dernier @
GROUP_SITE_SEPARATOR = "@"

# Annees reconnues : 4 chiffres, de 1000 a 2999
YEAR_LENGTH = 4
YEAR_LEADING_DIGITS = frozenset({"1", "2"})

# Alias des sources, compares en minuscules.
# Les ensembles sont disjoints : un alias n'appartient qu'a une seule source.
DIGITAL_FORMAT_ALIASES: tuple[tuple[DigitalFormat, frozenset[str]], ...] = (
    (DigitalFormat.BLURAY, frozenset({"bluray", "blu-ray", "blueray", "bd"})),
    (DigitalFormat.HDTV, frozenset({"hdtv"})),
    (DigitalFormat.WEBDL, frozenset({"webdl", "web-dl"})),
    (DigitalFormat.UHDTV, frozenset({"uhdtv"})),
)

# Alias des resolutions, compares en minuscules
DIGITAL_RESOLUTION_ALIASES: tuple[tuple[DigitalResolution, frozenset[str]], ...] = (
    (DigitalResolution.FHD, frozenset({"1080", "1080p", "1080i"})),
    (DigitalResolution.HD, frozenset({"720", "720p"})),
    (DigitalResolution.UHD4K, frozenset({"4k"})),
)
