# src/denvar/core/store.py
"""
ConfigStore — leitura do arquivo de ambiente e seleção de camadas.

Este módulo é responsável por ler o arquivo de ambiente do disco,
validar sua estrutura mínima e selecionar as duas camadas relevantes
para uma resolução: a camada comum (`common`) e a camada do ambiente
solicitado.

Formato do documento:
    {
        "common":      {"S3_BUCKET": "assets"},
        "development": {"MONGO_URL": "mongodb://localhost"},
        "production":  {"MONGO_URL": "mongodb://db.internal"}
    }

Formatos suportados:
    - JSON (.json, .env)
    - YAML (.yaml, .yml)

Decisões arquiteturais:
    - O arquivo é relido a cada chamada (sem cache entre chamadas)
    - A camada comum é opcional; a camada do ambiente é obrigatória
    - Camadas devem ser mapas planos (sem valores aninhados)
    - Qualquer falha levanta exceção tipada; nunca há estrutura parcial

Invariantes:
    - O retorno de `read` contém no máximo duas entradas
    - A leitura não produz efeitos colaterais além do I/O de leitura

Limites explícitos:
    - Não escreve no ambiente do processo
    - Não valida valores individuais
    - Não compõe múltiplos arquivos
"""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidLayerTypeError,
    MissingEnvironmentError,
    SourceNotFoundError,
    UnsupportedConfigFormatError,
)
from .options import DenvarOptions

JSON_SUFFIXES = {".json", ".env"}
YAML_SUFFIXES = {".yaml", ".yml"}


def _format_of(path: Path) -> str:
    # `.env` não tem suffix para pathlib: o nome inteiro é tratado como stem
    suffix = path.suffix.lower() or path.name.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise UnsupportedConfigFormatError(f"Formato não suportado: {path.name} ({path})")


def _load_document(path: Path, encoding: str) -> Dict[str, Any]:
    """
    Carrega o arquivo e valida que o conteúdo raiz é um dicionário.

    Arquivos YAML vazios são interpretados como dicionários vazios.
    Arquivos JSON vazios são documentos malformados.

    Raises:
        SourceNotFoundError: Se o arquivo não existir ou não puder ser lido.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo não for JSON/YAML bem formado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    fmt = _format_of(path)

    if not path.is_file():
        raise SourceNotFoundError(str(path))

    try:
        text = path.read_text(encoding=encoding)
    except OSError as e:
        raise SourceNotFoundError(str(path), reason=e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Encoding inválido em {path}: {e}") from e

    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"JSON malformado em {path}: {e}") from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"YAML malformado em {path}: {e}") from e
        if data is None:
            data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz de {path} deve ser um mapa de ambientes, recebido: {type(data).__name__}"
        )

    return data


def _check_layer(name: str, layer: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(layer, dict):
        raise InvalidLayerTypeError(
            f"Camada '{name}' em {path} deve ser um mapa, recebido: {type(layer).__name__}"
        )

    for key, value in layer.items():
        if not isinstance(key, str):
            raise InvalidLayerTypeError(
                f"Camada '{name}' em {path}: chave {key!r} deve ser string"
            )
        if isinstance(value, (dict, list)):
            raise InvalidLayerTypeError(
                f"Camada '{name}' em {path}: valor de '{key}' não pode ser aninhado"
            )

    return layer


class ConfigStore:
    """
    Fonte de configuração baseada em arquivo.

    Args:
        path: Caminho do arquivo de ambiente.
        options: Tokens reservados; defaults de `DenvarOptions` quando omitido.
    """

    def __init__(self, path: Union[str, PathLike], *, options: Optional[DenvarOptions] = None):
        self.path = Path(path)
        self.options = options or DenvarOptions()

    def __repr__(self) -> str:
        return f"ConfigStore(path={str(self.path)!r})"

    def read(self, env: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
        """
        Lê o arquivo e retorna as camadas `common` (se presente) e `<env>`.

        Args:
            env: Ambiente solicitado; `options.default_environment` quando omitido.

        Returns:
            Dict[str, Dict[str, Any]]: No máximo duas entradas, `common` e `<env>`.

        Raises:
            SourceNotFoundError, ConfigParseError (e subclasses),
            MissingEnvironmentError.
        """
        env = env or self.options.default_environment
        common_key = self.options.common_key

        document = _load_document(self.path, self.options.encoding)

        if env not in document:
            raise MissingEnvironmentError(env, str(self.path))

        layers: Dict[str, Dict[str, Any]] = {}
        if common_key in document:
            layers[common_key] = _check_layer(common_key, document[common_key], self.path)
        layers[env] = _check_layer(env, document[env], self.path)

        return layers
