# src/denvar/core/resolver.py
"""
ResolutionEngine — merge com precedência e extração reversa.

Este módulo implementa as regras semânticas do Denvar:

Merge (load):
    - A camada comum é aplicada primeiro, depois a camada do ambiente
    - Cada chave só é escrita se o espaço alvo ainda não a define
    - A verificação é feita ao vivo, chave a chave

    Consequências:
        - Valores pré-existentes no alvo sempre vencem ambas as camadas
        - Para chaves presentes nas duas camadas, vence a camada comum
          (first-write-wins), pois ela é aplicada antes

Extração reversa (npm config):
    - Varre uma fonte chave/valor (por padrão `os.environ`)
    - Aceita chaves com prefixo `npm_config_C_` (comum) ou
      `npm_config_<grupo>_` (ambiente)
    - A chave de saída é o sufixo após o prefixo, com o case original
    - A comparação do token de grupo é case-sensitive

Exportação:
    - Produz a sequência ordenada de pares (comum, depois ambiente),
      preservando chaves duplicadas; a precedência final é do sink

Invariantes:
    - Em caso de erro do store, o alvo não recebe nenhuma escrita
    - A extração nunca levanta erro para uma `KeyValueSource`; resultado vazio é válido

Limites explícitos:
    - Não executa comandos externos
    - Não cria arquivos
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .errors import DenvarError
from .events import EventLog
from .options import DenvarOptions
from .store import ConfigStore
from .target import KeyValueSource, TargetSpace
from .types import LoadResult, ResolutionStatus


def stringify(value: Any) -> str:
    """Converte um valor do arquivo para a representação guardada no ambiente."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # 1.0 → "1", como String() do JavaScript
        return str(int(value))
    return str(value)


def _iter_source(source: Any) -> Iterable[Tuple[str, Any]]:
    items = getattr(source, "items", None)
    if items is None:
        raise TypeError(f"Fonte de extração sem items(): {type(source).__name__}")
    return items()


class ResolutionEngine:
    """
    Motor de resolução de configuração.

    Args:
        store: Fonte das camadas; obrigatória para `load` e `export_pairs`,
            dispensável para a extração reversa.
        options: Tokens reservados; por padrão os mesmos do store.
    """

    def __init__(self, store: Optional[ConfigStore] = None, *, options: Optional[DenvarOptions] = None):
        self.store = store
        if options is None:
            options = store.options if store is not None else DenvarOptions()
        self.options = options

    def _require_store(self) -> ConfigStore:
        if self.store is None:
            raise DenvarError("ResolutionEngine sem ConfigStore associado")
        return self.store

    # -----------------------------
    # Forward merge
    # -----------------------------
    def load(self, env: Optional[str], target: TargetSpace) -> LoadResult:
        """
        Mescla `common` e `<env>` no espaço alvo, sem sobrescrever chaves existentes.

        Erros do store são capturados e devolvidos no `LoadResult`
        (status FAILED); nesse caso nenhuma escrita ocorre.

        Args:
            env: Ambiente solicitado; o default das opções quando omitido.
            target: Espaço alvo (ambiente do processo ou mapa em memória).

        Returns:
            LoadResult: APPLIED, NOOP ou FAILED.
        """
        store = self._require_store()
        env = env or self.options.default_environment
        source = str(store.path)
        log = EventLog()

        try:
            layers = store.read(env)
        except DenvarError as e:
            log.emit(
                "resolution_failed",
                level="error",
                message=str(e),
                environment=env,
                source=source,
                error_type=type(e).__name__,
            )
            return LoadResult(
                environment=env,
                source=source,
                status=ResolutionStatus.FAILED,
                error=e,
                events=log.freeze(),
            )

        log.emit("source_loaded", message=f"{source} lido", environment=env, layers=list(layers))

        applied: List[str] = []
        skipped: List[str] = []

        for layer_name, variables in self._ordered_layers(layers, env):
            for key, value in variables.items():
                if target.has(key):
                    skipped.append(key)
                    log.emit("variable_skipped", level="debug", key=key, layer=layer_name)
                    continue
                target.set(key, stringify(value))
                applied.append(key)
                log.emit("variable_set", level="debug", key=key, layer=layer_name)

        status = ResolutionStatus.APPLIED if applied else ResolutionStatus.NOOP
        log.emit(
            "resolution_finished",
            message=f"{len(applied)} aplicadas, {len(skipped)} ignoradas",
            environment=env,
            status=status.value,
        )

        return LoadResult(
            environment=env,
            source=source,
            status=status,
            applied=tuple(applied),
            skipped=tuple(skipped),
            events=log.freeze(),
        )

    def _ordered_layers(self, layers: Mapping[str, Dict[str, Any]], env: str):
        common_key = self.options.common_key
        ordered = []
        if common_key in layers and env != common_key:
            ordered.append((common_key, layers[common_key]))
        ordered.append((env, layers[env]))
        return ordered

    # -----------------------------
    # Export pairs
    # -----------------------------
    def export_pairs(self, env: Optional[str] = None) -> List[Tuple[str, str, str]]:
        """
        Sequência ordenada de `(layer, key, value)` para exportação.

        A camada comum vem primeiro; chaves duplicadas entre camadas são
        mantidas. Erros do store propagam como exceção.
        """
        env = env or self.options.default_export_environment
        layers = self._require_store().read(env)
        return [
            (layer_name, key, stringify(value))
            for layer_name, variables in self._ordered_layers(layers, env)
            for key, value in variables.items()
        ]

    # -----------------------------
    # Reverse extraction
    # -----------------------------
    def extract_prefixed(
        self,
        env_prefix: str,
        source: Optional[Union[Mapping[str, str], KeyValueSource]] = None,
    ) -> Dict[str, str]:
        """
        Recupera variáveis codificadas por prefixo, sem o prefixo.

        Exemplo (opções padrão, `env_prefix="dev"`):
            npm_config_C_S3_USER    → S3_USER
            npm_config_dev_MONGO    → MONGO
            npm_config_DEV_MONGO    → (ignorada: case diferente)

        Args:
            env_prefix: Token de grupo do ambiente (case-sensitive).
            source: Fonte chave/valor com `items()`; `os.environ` por padrão.

        Returns:
            Dict[str, str]: Mapa sufixo → valor; vazio se nada casar.
        """
        common_prefix = self.options.npm_prefix(self.options.npm_common_prefix)
        env_group_prefix = self.options.npm_prefix(env_prefix)

        config: Dict[str, str] = {}
        for key, value in _iter_source(os.environ if source is None else source):
            if key.startswith(common_prefix):
                config[key[len(common_prefix):]] = value
            elif key.startswith(env_group_prefix):
                config[key[len(env_group_prefix):]] = value

        return config
