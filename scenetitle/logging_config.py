"""
Configuration du logging de SceneTitle via loguru.

Le parser trace chaque nom de release analysé au niveau DEBUG (tokens,
titre retenu, champs reconnus). Ces traces servent à comprendre pourquoi
un titre a été coupé à tel token ; elles n'ont pas leur place sur la
console en temps normal.

D'où deux sorties :
- stderr, au niveau choisi par l'appelant (INFO par défaut, donc sans les traces)
- un fichier JSON optionnel qui garde toutes les traces de parsing

Le package ne touche jamais au logging à l'import : l'application appelante
appelle configure_logging, ou Container.init_resources().
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de SceneTitle.

    Args :
        log_level : Niveau minimum sur stderr (DEBUG pour voir chaque parsing)
        log_file : Fichier JSON recevant toutes les traces, None pour stderr seul
        rotation_size : Taille déclenchant la rotation du fichier (ex: "10 MB")
        retention_count : Nombre d'archives du fichier à conserver
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    # Le fichier garde les traces DEBUG du parser quel que soit log_level
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.info(f"Traces de parsing écrites dans {log_file}")
