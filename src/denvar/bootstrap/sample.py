# src/denvar/bootstrap/sample.py
"""
Arquivos de exemplo e descoberta do arquivo de ambiente.

Os exemplos (`env.json` e `.npmrc`) são distribuídos como package data
em `denvar/samples/` e copiados para o projeto do usuário sob demanda.

Decisões arquiteturais:
    - Um arquivo existente nunca é sobrescrito
    - Tipo desconhecido cai no exemplo JSON
    - Diretório inexistente cai no diretório corrente

Limites explícitos:
    - Não lê nem valida o conteúdo dos arquivos
    - Não participa da resolução de variáveis
"""

from __future__ import annotations

from importlib import resources
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from ..core.errors import EnvFileCreationError
from ..core.options import DenvarOptions


def _sample_bytes(name: str) -> bytes:
    return resources.files("denvar").joinpath("samples", name).read_bytes()


def _copy_sample(name: str, destination: Path) -> Path:
    try:
        content = _sample_bytes(name)
    except (FileNotFoundError, OSError) as e:
        raise EnvFileCreationError(f"Exemplo '{name}' não encontrado no pacote") from e

    try:
        # modo "x": falha se o destino já existir
        with destination.open("xb") as f:
            f.write(content)
    except FileExistsError as e:
        raise EnvFileCreationError(f'Arquivo "{destination}" já existe.') from e
    except OSError as e:
        raise EnvFileCreationError(f'Não foi possível criar "{destination}": {e}') from e

    return destination


def create_env_file(
    file_type: str = "json",
    directory: Union[str, PathLike, None] = None,
    *,
    options: Optional[DenvarOptions] = None,
) -> Path:
    """
    Cria um arquivo de ambiente de exemplo (`env.json` ou `.npmrc`).

    Args:
        file_type: `json` ou `npmrc`; outros valores caem em `json`.
        directory: Diretório de destino; o diretório corrente quando omitido
            ou quando o caminho não é um diretório.
        options: Tokens reservados (nomes de arquivo por tipo).

    Returns:
        Path: Caminho do arquivo criado.

    Raises:
        EnvFileCreationError: Se o destino já existir ou a cópia falhar.
    """
    opts = options or DenvarOptions()
    name = opts.env_file_for(file_type)
    sample = ".npmrc" if file_type == "npmrc" else "env.json"

    base = Path(directory) if directory is not None else Path.cwd()
    if not base.is_dir():
        base = Path.cwd()

    return _copy_sample(sample, base / name)


def discover_env_file(
    directory: Union[str, PathLike],
    *,
    options: Optional[DenvarOptions] = None,
    create_missing: bool = False,
) -> Path:
    """
    Localiza o arquivo de ambiente de um projeto.

    Ordem de busca:
        1. `env.json`
        2. nomes alternativos (`.env`)

    Quando nenhum existe, copia o `env.json` de exemplo se `create_missing`
    for verdadeiro; caso contrário retorna o caminho padrão mesmo assim,
    deixando a leitura falhar com `SourceNotFoundError`.
    """
    opts = options or DenvarOptions()
    base = Path(directory)
    default = base / opts.env_file_for("json")

    if default.is_file():
        return default

    for name in opts.fallback_env_files:
        candidate = base / name
        if candidate.is_file():
            return candidate

    if create_missing:
        _copy_sample("env.json", default)

    return default
