# src/denvar/core/events.py
"""
Event log estruturado do Denvar.

Cada invocação (load, exportação) acumula seus próprios eventos em uma
instância de `EventLog`, que depois é anexada ao resultado. Não há
configuração global de logging: o chamador decide o que imprimir ou
persistir a partir dos eventos.

Formato de um evento:
    {
        "event_type": "variable_set",
        "level": "info",
        "message": "...",
        "timestamp": "2024-01-01T00:00:00+00:00",
        ...campos extras
    }

Invariantes:
    - Timestamps são sempre UTC em ISO 8601
    - Eventos são mantidos na ordem de emissão
    - Valores de variáveis nunca são registrados, apenas chaves
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple


@dataclass
class EventLog:
    events: List[Dict[str, Any]] = field(default_factory=list)

    def emit(self, event_type: str, *, level: str = "info", message: str = "", **extra: Any) -> None:
        event = {
            "event_type": event_type,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def freeze(self) -> Tuple[Dict[str, Any], ...]:
        # cópia rasa: resultados não devem compartilhar a lista mutável
        return tuple(dict(e) for e in self.events)
