"""
Implémentation du parser de noms de release scene.

Ce module fournit SceneTitleParser qui implémente ITitleParser pour extraire
titre, année, source, résolution et groupe d'un nom de release
(ex: "Some.Movie.Title.2015.1080p.BluRay.x264-GROUP").

Le parsing se fait en quatre heuristiques indépendantes sur les mêmes tokens :
- l'année : premier token de 4 chiffres commençant par 1 ou 2
- la source : premier token present dans les alias de DigitalFormat
- la résolution : premier token présent dans les alias de DigitalResolution
- le groupe : ce qui suit le dernier tiret du dernier token

Le titre est formé des tokens qui précèdent le premier champ reconnu.
"""

import re
from typing import Iterator, Optional, TypeVar

from loguru import logger

from scenetitle.core.ports.parser import ITitleParser
from scenetitle.core.value_objects.media_info import (
    DigitalFormat,
    DigitalResolution,
    MediaInfo,
)
from scenetitle.utils.constants import (
    DIGITAL_FORMAT_ALIASES,
    DIGITAL_RESOLUTION_ALIASES,
    GROUP_SEPARATOR,
    GROUP_SITE_SEPARATOR,
    TOKEN_DELIMITERS,
    YEAR_LEADING_DIGITS,
    YEAR_LENGTH,
)

_E = TypeVar("_E", DigitalFormat, DigitalResolution)

_DELIMITERS_PATTERN = re.compile(
    "[" + re.escape("".join(sorted(TOKEN_DELIMITERS))) + "]+"
)


def tokenize(title: str) -> list[str]:
    """
    Decoupe un nom de release en tokens.

    Les points et les espaces sont des delimiteurs ; les suites de
    delimiteurs sont fusionnees et aucun token vide n'est produit.

    Args:
        title: Nom de release

    Returns:
        Liste ordonnee des tokens non vides
    """
    return [token for token in _DELIMITERS_PATTERN.split(title) if token]


def _candidates(
    tokens: list[str], strip_group: bool = False
) -> Iterator[tuple[int, str]]:
    """
    Énumère les formes candidates de chaque token, avec leur index.

    Avec strip_group, le dernier token ("720p-GROUP") est aussi proposé
    sans son groupe, après le token entier. Sinon seuls les tokens
    entiers sont proposés.
    """
    last_index = len(tokens) - 1
    for index, token in enumerate(tokens):
        yield index, token
        if strip_group and index == last_index and GROUP_SEPARATOR in token:
            head = token.rsplit(GROUP_SEPARATOR, 1)[0]
            if head:
                yield index, head


def _try_parse_year(token: str) -> Optional[int]:
    """
    Convertit un token en année s'il en a la forme.

    Args:
        token: Token candidat

    Returns:
        Annee (1000 a 2999), ou None si le token n'est pas une annee
    """
    if len(token) != YEAR_LENGTH:
        return None
    if token[0] not in YEAR_LEADING_DIGITS:
        return None
    # isdigit() seul accepte des chiffres non ASCII ("²") que int() refuse
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def find_year(tokens: list[str]) -> tuple[Optional[int], Optional[int]]:
    """
    Cherche la première année dans les tokens.

    Args:
        tokens: Tokens du nom de release

    Returns:
        Tuple (annee, index du token), ou (None, None) si aucune annee
    """
    for index, token in enumerate(tokens):
        year = _try_parse_year(token)
        if year is not None:
            return year, index
    return None, None


def _find_alias(
    tokens: list[str],
    aliases: tuple[tuple[_E, frozenset[str]], ...],
    unknown: _E,
    strip_group: bool = False,
) -> tuple[_E, Optional[int]]:
    """Cherche le premier token présent dans une table d'alias."""
    for index, candidate in _candidates(tokens, strip_group):
        lowered = candidate.lower()
        for value, names in aliases:
            if lowered in names:
                return value, index
    return unknown, None


def find_source(tokens: list[str]) -> tuple[DigitalFormat, Optional[int]]:
    """
    Cherche la source de distribution dans les tokens.

    La comparaison est insensible a la casse ("BluRay", "BLURAY" -> BLURAY).

    Args:
        tokens: Tokens du nom de release

    Returns:
        Tuple (source, index du token), ou (UNKNOWN, None)
    """
    return _find_alias(tokens, DIGITAL_FORMAT_ALIASES, DigitalFormat.UNKNOWN)


def find_resolution(tokens: list[str]) -> tuple[DigitalResolution, Optional[int]]:
    """
    Cherche la resolution dans les tokens.

    Args:
        tokens: Tokens du nom de release

    Returns:
        Tuple (resolution, index du token), ou (UNKNOWN, None)
    """
    return _find_alias(
        tokens,
        DIGITAL_RESOLUTION_ALIASES,
        DigitalResolution.UNKNOWN,
        strip_group=True,
    )


def find_group(tokens: list[str]) -> str:
    """
    Extrait le groupe de release du dernier token.

    Le groupe est ce qui suit le dernier tiret ("x264-GROUP" -> "GROUP").
    Pour la convention "TAG-GROUP@SITE", on garde ce qui suit le dernier @.
    Seul le dernier token est examine, quels que soient les autres champs.

    Args:
        tokens: Tokens du nom de release

    Returns:
        Groupe de release, ou chaine vide si absent
    """
    if not tokens:
        return ""

    last = tokens[-1]
    if GROUP_SEPARATOR not in last:
        return ""

    group = last.rsplit(GROUP_SEPARATOR, 1)[1]
    if GROUP_SITE_SEPARATOR in group:
        group = group.rsplit(GROUP_SITE_SEPARATOR, 1)[1]
    return group


def _cut_index(tokens: list[str], *indices: Optional[int]) -> int:
    """Index du premier champ reconnu, ou la longueur des tokens si aucun."""
    found = [index for index in indices if index is not None]
    return min(found, default=len(tokens))


class SceneTitleParser(ITitleParser):
    """
    Parser de noms de release suivant les conventions scene.

    Extrait titre, annee, source, resolution et groupe depuis un nom
    de release. Sans etat : une meme instance peut etre partagee.
    """

    def parse(self, title: str) -> MediaInfo:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            title: Nom de release (extension deja retiree)

        Returns:
            MediaInfo avec les informations extraites.
            Une entree vide donne MediaInfo() (tous les champs absents).
        """
        if not title:
            return MediaInfo()

        tokens = tokenize(title)

        year, year_index = find_year(tokens)
        source, source_index = find_source(tokens)
        resolution, resolution_index = find_resolution(tokens)
        group = find_group(tokens)

        cut = _cut_index(tokens, year_index, source_index, resolution_index)
        movie_title = " ".join(tokens[:cut])

        logger.debug(
            f"Parsing '{title}' : {len(tokens)} tokens, titre='{movie_title}', "
            f"annee={year}, source={source.label}, resolution={resolution.label}, "
            f"groupe='{group}'"
        )

        return MediaInfo(
            title=movie_title,
            year=year,
            group=group,
            source=source,
            resolution=resolution,
        )


_default_parser = SceneTitleParser()


def parse_title(title: str) -> MediaInfo:
    """Parse un nom de release avec le parser partagé."""
    return _default_parser.parse(title)
