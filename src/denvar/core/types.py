# src/denvar/core/types.py
"""
Tipos de resultado do Denvar.

Este módulo define as estruturas imutáveis retornadas pelas operações de
resolução e exportação, substituindo o padrão "loga o erro e retorna
false" por valores explícitos que distinguem sucesso, no-op e falha.

Componentes principais:
    - ResolutionStatus → estado final de um `load` (APPLIED, NOOP, FAILED)
    - LoadResult       → resultado de um `load`
    - ExportOutcome    → resultado de um único par exportado
    - ExportReport     → relatório completo de uma exportação

Invariantes:
    - Resultados são `frozen` e seguros contra mutação acidental
    - Um `LoadResult` FAILED sempre carrega `error`
    - `LoadResult.applied` e `LoadResult.skipped` nunca se sobrepõem

Limites explícitos:
    - Não executa merge nem exportação
    - Não contém valores de variáveis além dos pares exportados
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import DenvarError


class ResolutionStatus(str, Enum):
    """
    Estados finais de uma resolução.

    Estados definidos:
        - APPLIED: ao menos uma variável foi escrita no espaço alvo
        - NOOP: resolução válida, mas nenhuma variável precisou ser escrita
          (camadas vazias ou todas as chaves já definidas)
        - FAILED: a resolução não foi realizada; o espaço alvo está intacto
    """

    APPLIED = "applied"
    NOOP = "noop"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadResult:
    """
    Resultado imutável de um `load`.

    Campos:
        - environment: ambiente solicitado (após aplicar o default)
        - source: caminho do arquivo lido
        - status: estado final da resolução
        - applied: chaves escritas, na ordem de escrita
        - skipped: chaves ignoradas por já estarem definidas no alvo
        - error: exceção capturada quando `status` é FAILED
        - events: event log da invocação
    """

    environment: str
    source: str
    status: ResolutionStatus
    applied: Tuple[str, ...] = ()
    skipped: Tuple[str, ...] = ()
    error: Optional[DenvarError] = None
    events: Tuple[Dict[str, Any], ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is not ResolutionStatus.FAILED

    def raise_for_status(self) -> "LoadResult":
        """Re-levanta o erro capturado; retorna o próprio resultado caso contrário."""
        if self.error is not None:
            raise self.error
        return self


@dataclass(frozen=True)
class ExportOutcome:
    key: str
    value: str
    layer: str
    ok: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ExportReport:
    """
    Relatório de uma exportação best-effort.

    Cada par emitido gera exatamente um `ExportOutcome`, na ordem em que
    foi entregue ao sink (camada comum primeiro, depois o ambiente).
    """

    environment: str
    remote: str
    outcomes: Tuple[ExportOutcome, ...] = field(default_factory=tuple)
    events: Tuple[Dict[str, Any], ...] = ()

    @property
    def succeeded(self) -> Tuple[ExportOutcome, ...]:
        return tuple(o for o in self.outcomes if o.ok)

    @property
    def failed(self) -> Tuple[ExportOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.ok)

    @property
    def ok(self) -> bool:
        return not self.failed
