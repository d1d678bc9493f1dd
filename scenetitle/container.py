"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee de la configuration, du logging
et du parser de noms de release pour les applications appelantes.
"""

from dependency_injector import containers, providers

from .adapters.parsing.scene_parser import SceneTitleParser
from .config import Settings
from .logging_config import configure_logging


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.init_resources()  # Configure le logging une fois
        parser = container.title_parser()
        info = parser.parse("Movie.2020.WEBDL.720p-TAG@SITE")
    """

    # Configuration - singleton chargée une seule fois
    config = providers.Singleton(Settings)

    # Logging - Resource pour initialisation unique
    logging_setup = providers.Resource(
        configure_logging,
        log_level=config.provided.log_level,
        log_file=config.provided.log_file,
        rotation_size=config.provided.log_rotation_size,
        retention_count=config.provided.log_retention_count,
    )

    # Parser sans état - Singleton
    title_parser = providers.Singleton(SceneTitleParser)
