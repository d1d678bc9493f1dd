"""
Interface port pour le parsing de noms de release.

Interface abstraite (port) definissant le contrat pour extraire
les metadonnees d'un nom de release scene.
"""

from abc import ABC, abstractmethod

from scenetitle.core.value_objects.media_info import MediaInfo


class ITitleParser(ABC):
    """
    Interface pour le parsing de noms de release.

    Definit le contrat pour extraire les informations structurees
    (titre, annee, groupe, source, resolution) depuis un nom de release.
    """

    @abstractmethod
    def parse(self, title: str) -> MediaInfo:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            title: Nom de release a parser (extension deja retiree)

        Retourne:
            MediaInfo avec les informations extraites.
            Ne leve jamais d'exception : les champs non reconnus
            prennent leur valeur absente.
        """
        ...
