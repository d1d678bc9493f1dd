"""
Fixtures pytest partagées pour les tests SceneTitle.

Ce module contient les fixtures communes utilisees dans les tests:
- Instance du parser de noms de release
- Settings de test avec chemins temporaires
- Capture des messages loguru
"""

from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

from scenetitle.adapters.parsing.scene_parser import SceneTitleParser
from scenetitle.config import Settings


@pytest.fixture
def parser() -> SceneTitleParser:
    """Instance du parser pour les tests."""
    return SceneTitleParser()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec fichier de log temporaire.

    Utilise tmp_path de pytest pour isoler les logs de chaque test.
    """
    return Settings(
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
        log_rotation_size="1 MB",
        log_retention_count=2,
    )


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture les messages loguru émis pendant le test (niveau DEBUG)."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
