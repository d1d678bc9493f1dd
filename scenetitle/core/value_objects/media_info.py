"""
Objets valeur pour les informations extraites d'un nom de release.

Objets valeur immutables représentant la source, la resolution et le resultat
complet du parsing d'un nom de release scene.
Le résultat utilise @dataclass(frozen=True) pour garantir l'immutabilite.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DigitalFormat(Enum):
    """Source de distribution numerique detectee dans le nom de release.

    Valeurs:
        BLURAY: Rip de disque Blu-ray
        HDTV: Capture de diffusion TV haute definition
        WEBDL: Telechargement depuis une plateforme web
        UHDTV: Capture de diffusion TV ultra haute definition
        UNKNOWN: Source non determinee
    """

    BLURAY = "bluray"
    HDTV = "hdtv"
    WEBDL = "webdl"
    UHDTV = "uhdtv"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Libelle lisible de la source (ex: "BluRay", "WEB-DL")."""
        return _FORMAT_LABELS[self]


class DigitalResolution(Enum):
    """Classe de resolution detectee dans le nom de release.

    Valeurs:
        FHD: Full HD (1080p / 1080i)
        HD: HD (720p)
        UHD4K: Ultra HD 4K
        UNKNOWN: Resolution non determinee
    """

    FHD = "fhd"
    HD = "hd"
    UHD4K = "uhd4k"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Libelle lisible de la resolution (4K, 1080p, 720p)."""
        return _RESOLUTION_LABELS[self]


_FORMAT_LABELS = {
    DigitalFormat.BLURAY: "BluRay",
    DigitalFormat.HDTV: "HDTV",
    DigitalFormat.WEBDL: "WEB-DL",
    DigitalFormat.UHDTV: "UHDTV",
    DigitalFormat.UNKNOWN: "Unknown",
}

_RESOLUTION_LABELS = {
    DigitalResolution.FHD: "1080p",
    DigitalResolution.HD: "720p",
    DigitalResolution.UHD4K: "4K",
    DigitalResolution.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class MediaInfo:
    """
    Informations extraites du parsing d'un nom de release.

    Objet valeur immutable produit une fois par appel au parser.
    Chaque champ non reconnu prend sa valeur "absente" : chaîne vide,
    None pour l'annee, UNKNOWN pour la source et la resolution.
    MediaInfo() sans argument est donc le résultat d'une entrée vide.

    Attributs:
        title: Titre reconstruit depuis les tokens de tete
        year: Annee de sortie (None si absente)
        group: Groupe de release (chaine vide si absent)
        source: Source de distribution (ex: BLURAY, WEBDL)
        resolution: Classe de resolution (ex: FHD, HD)
    """

    title: str = ""
    year: Optional[int] = None
    group: str = ""
    source: DigitalFormat = DigitalFormat.UNKNOWN
    resolution: DigitalResolution = DigitalResolution.UNKNOWN

    @property
    def has_year(self) -> bool:
        """Indique si une année a été reconnue."""
        return self.year is not None

    @property
    def is_empty(self) -> bool:
        """Indique si aucune information n'a ete extraite."""
        return self == MediaInfo()

    @property
    def release_name(self) -> str:
        """
        Nom de release normalise, sans les parties absentes.

        Format : Titre (Annee) Resolution Source-Groupe
        Exemple : "Some Movie Title (2015) 1080p BluRay-GROUP"
        """
        parts = []
        if self.title:
            parts.append(self.title)
        if self.year is not None:
            parts.append(f"({self.year})")
        if self.resolution is not DigitalResolution.UNKNOWN:
            parts.append(self.resolution.label)
        if self.source is not DigitalFormat.UNKNOWN:
            parts.append(self.source.label)

        name = " ".join(parts)
        if self.group:
            name = f"{name}-{self.group}" if name else self.group
        return name
