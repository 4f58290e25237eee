# src/denvar/__init__.py
"""
Denvar — variáveis de ambiente por ambiente a partir de arquivo.

Este pacote raiz expõe a fachada pública do Denvar: carregar variáveis
de um arquivo `env.json` (ou `.env`, YAML) para o ambiente do processo,
recuperar configuração codificada por prefixo (`npm_config_*`) e
exportar um ambiente para o armazenamento de configuração remoto de uma
plataforma de deploy.

Arquitetura em alto nível:
    - core.options   → tokens reservados e defaults documentados
    - core.store     → leitura do arquivo e seleção das camadas
    - core.resolver  → merge com precedência e extração reversa
    - export         → push best-effort para um sink remoto
    - bootstrap      → criação de arquivos de exemplo

Limites explícitos:
    - Não suporta valores aninhados
    - Não gerencia segredos nem criptografia
    - Não observa arquivos (sem hot-reload)
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Mapping, Optional, Union

from .bootstrap.sample import create_env_file, discover_env_file
from .core.errors import DenvarError, EnvFileCreationError, MissingEnvironmentError
from .core.events import EventLog
from .core.options import DenvarOptions
from .core.resolver import ResolutionEngine
from .core.store import ConfigStore
from .core.target import EnvironTarget, MemoryTarget, TargetSpace
from .core.types import ExportReport, LoadResult, ResolutionStatus
from .export.exporter import export_environment

__version__ = "0.3.0"


def _bootstrap_failed(env: str, directory: Path, opts: DenvarOptions, error: EnvFileCreationError) -> LoadResult:
    source = str(directory / opts.env_file_for("json"))
    log = EventLog()
    log.emit(
        "bootstrap_failed",
        level="error",
        message=str(error),
        environment=env,
        source=source,
        error_type=type(error).__name__,
    )
    return LoadResult(
        environment=env,
        source=source,
        status=ResolutionStatus.FAILED,
        error=error,
        events=log.freeze(),
    )


def load(
    env: Optional[str] = None,
    *,
    path: Optional[Union[str, PathLike]] = None,
    target: Optional[TargetSpace] = None,
    options: Optional[DenvarOptions] = None,
) -> LoadResult:
    """
    Carrega `common` + `<env>` no ambiente do processo (ou em `target`).

    Sem `path`, o arquivo é descoberto no diretório corrente; se nenhum
    existir, o `env.json` de exemplo é copiado antes da leitura. Falha na
    cópia também resulta em `LoadResult` FAILED, nunca em exceção.
    """
    opts = options or DenvarOptions()
    if path is not None:
        source = Path(path)
    else:
        try:
            source = discover_env_file(Path.cwd(), options=opts, create_missing=True)
        except EnvFileCreationError as e:
            return _bootstrap_failed(env or opts.default_environment, Path.cwd(), opts, e)
    engine = ResolutionEngine(ConfigStore(source, options=opts), options=opts)
    return engine.load(env, target if target is not None else EnvironTarget())


def get_npm_config(
    env_prefix: str,
    source: Optional[Mapping[str, str]] = None,
    *,
    options: Optional[DenvarOptions] = None,
) -> dict:
    """Recupera variáveis `npm_config_<C|env_prefix>_*` sem o prefixo."""
    return ResolutionEngine(options=options).extract_prefixed(env_prefix, source)


__all__ = [
    "ConfigStore",
    "DenvarError",
    "DenvarOptions",
    "EnvironTarget",
    "ExportReport",
    "LoadResult",
    "MemoryTarget",
    "MissingEnvironmentError",
    "ResolutionEngine",
    "ResolutionStatus",
    "TargetSpace",
    "create_env_file",
    "discover_env_file",
    "export_environment",
    "get_npm_config",
    "load",
]
