"""
SceneTitle - Extraction des metadonnees d'un nom de release scene.

Ce package analyse un nom de fichier ou de release (ex:
"Some.Movie.Title.2015.1080p.BluRay.x264-GROUP") et en extrait le titre,
l'annee, la source, la resolution et le groupe de release.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- adapters/ : Couche infrastructure (parser de noms de release)
- utils/ : Tables d'alias et constantes partagees

Utilisation :
    from scenetitle import parse_title

    info = parse_title("Movie.2020.WEBDL.720p-TAG@SITE")
    info.title  # "Movie"
"""

from scenetitle.adapters.parsing.scene_parser import SceneTitleParser, parse_title
from scenetitle.core.value_objects import DigitalFormat, DigitalResolution, MediaInfo

__all__ = [
    "DigitalFormat",
    "DigitalResolution",
    "MediaInfo",
    "SceneTitleParser",
    "parse_title",
]
