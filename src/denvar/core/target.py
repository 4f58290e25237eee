# src/denvar/core/target.py
"""
Espaços alvo da resolução.

O `ResolutionEngine` nunca acessa `os.environ` diretamente: ele depende
apenas do protocolo `TargetSpace` (`has`, `get`, `set`). Isso permite
resolver contra o ambiente real do processo (`EnvironTarget`) ou contra
um mapa em memória (`MemoryTarget`), usado em testes e em relatórios.

Decisões arquiteturais:
    - O protocolo é mínimo e estrutural (duck typing)
    - `items()` não faz parte de `TargetSpace`; as implementações o oferecem
      para satisfazer também `KeyValueSource`, a fonte da extração reversa
    - Nenhuma implementação aplica normalização de chaves

Invariantes:
    - `set` só aceita strings (o ambiente do processo só guarda strings)

Limites explícitos:
    - Não há proteção contra escrita concorrente externa; o check-then-set
      do engine assume acesso single-thread durante a resolução
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Iterator, MutableMapping, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class TargetSpace(Protocol):
    def has(self, key: str) -> bool:
        ...

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


@runtime_checkable
class KeyValueSource(Protocol):
    """Fonte iterável da extração reversa (`os.environ`, `MemoryTarget`, ...)."""

    def items(self) -> Iterable[Tuple[str, str]]:
        ...


class EnvironTarget:
    """Espaço alvo sobre o ambiente do processo (ou outro mapa mutável injetado)."""

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def has(self, key: str) -> bool:
        return key in self._environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Valor de '{key}' deve ser str, recebido: {type(value).__name__}")
        self._environ[key] = value

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._environ.items()))


class MemoryTarget:
    """Espaço alvo em memória."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Valor de '{key}' deve ser str, recebido: {type(value).__name__}")
        self._data[key] = value

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._data.items()))

    def as_dict(self) -> Dict[str, str]:
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoryTarget(keys={sorted(self._data)})"
