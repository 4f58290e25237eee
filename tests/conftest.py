# tests/conftest.py
"""
Fixtures compartilhados para testes do Denvar.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de ambiente mínimos e determinísticos (JSON e YAML)
- um helper para materializar documentos em `tmp_path`
- espaços alvo em memória

Decisões arquiteturais:
    - Documentos são fornecidos como string; o I/O fica restrito a `tmp_path`
    - Nenhuma fixture toca o ambiente real do processo
    - Testes que precisam de `os.environ` usam `monkeypatch`

Invariantes:
    - Nenhuma fixture executa comandos externos
    - Todas as fixtures são seguras para execução em paralelo
"""

import json
from pathlib import Path

import pytest

from denvar.core.options import DenvarOptions
from denvar.core.target import MemoryTarget


@pytest.fixture
def env_document() -> dict:
    """
    Documento de ambiente semelhante ao uso real.

    `SHARED` aparece nas duas camadas de `development` para exercitar a
    precedência entre camadas.
    """
    return {
        "common": {
            "APP_NAME": "atlas",
            "SHARED": "from-common",
        },
        "development": {
            "MONGO_URL": "mongodb://localhost",
            "SHARED": "from-development",
            "DEBUG": True,
            "PORT": 3000,
        },
        "production": {
            "MONGO_URL": "mongodb://db.internal",
        },
    }


@pytest.fixture
def env_yaml() -> str:
    return """\
common:
  APP_NAME: atlas
staging:
  MONGO_URL: mongodb://staging
  WORKERS: 4
"""


@pytest.fixture
def write_env_file(tmp_path: Path):
    """Materializa um documento (dict ou texto) em `tmp_path` e retorna o caminho."""

    def _write(content, name: str = "env.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def options() -> DenvarOptions:
    return DenvarOptions()


@pytest.fixture
def empty_target() -> MemoryTarget:
    return MemoryTarget()
