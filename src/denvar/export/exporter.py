# src/denvar/export/exporter.py
"""
Exportação best-effort de um ambiente para um sink remoto.

Fluxo:
    1. O `ConfigStore` lê `common` + `<env>` do arquivo
    2. O `ResolutionEngine` produz os pares ordenados (comum primeiro)
    3. Cada par é entregue ao sink, estritamente em sequência
    4. Cada resultado (sucesso ou falha) vira um `ExportOutcome`

Política de falhas:
    - Erros do store (arquivo, parse, ambiente ausente) propagam antes de
      qualquer escrita
    - Falhas de escrita individuais (`ExportWriteError`) não interrompem a
      exportação: são registradas e o próximo par é enviado

Limites explícitos:
    - Não agrupa escritas em lote nem paraleliza
    - Não faz rollback de pares já escritos
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import List, Optional, Union

from ..bootstrap.sample import discover_env_file
from ..core.errors import ExportWriteError
from ..core.events import EventLog
from ..core.options import DenvarOptions
from ..core.resolver import ResolutionEngine
from ..core.store import ConfigStore
from ..core.types import ExportOutcome, ExportReport
from .sink import HerokuSink, RemoteConfigSink


def push_pairs(engine: ResolutionEngine, env: str, sink: RemoteConfigSink) -> ExportReport:
    """
    Entrega os pares de `env` ao sink, um por vez, coletando um relatório.

    Raises:
        DenvarError: Se o store falhar (nenhum par é enviado).
    """
    log = EventLog()
    pairs = engine.export_pairs(env)
    log.emit("export_started", environment=env, remote=sink.remote, pairs=len(pairs))

    outcomes: List[ExportOutcome] = []
    for layer, key, value in pairs:
        try:
            sink.write(key, value)
        except ExportWriteError as e:
            outcomes.append(ExportOutcome(key=key, value=value, layer=layer, ok=False, error=e.reason))
            log.emit("export_pair_failed", level="error", message=str(e), key=key, layer=layer)
            continue
        outcomes.append(ExportOutcome(key=key, value=value, layer=layer, ok=True))
        log.emit("export_pair_ok", level="debug", key=key, layer=layer)

    failed = sum(1 for o in outcomes if not o.ok)
    log.emit(
        "export_finished",
        level="warning" if failed else "info",
        message=f"{len(outcomes) - failed} exportadas, {failed} falharam",
        environment=env,
        remote=sink.remote,
    )

    return ExportReport(
        environment=env,
        remote=sink.remote,
        outcomes=tuple(outcomes),
        events=log.freeze(),
    )


def export_environment(
    env: Optional[str] = None,
    remote: Optional[str] = None,
    *,
    path: Optional[Union[str, PathLike]] = None,
    sink: Optional[RemoteConfigSink] = None,
    options: Optional[DenvarOptions] = None,
) -> ExportReport:
    """
    Exporta `common` + `<env>` para um remote de deploy.

    Args:
        env: Ambiente exportado; `production` por padrão.
        remote: Remote do sink Heroku; `heroku` por padrão. Ignorado
            quando `sink` é informado.
        path: Arquivo de ambiente; descoberto no diretório corrente por padrão
            (`env.json`, depois `.env`), sem criar arquivo de exemplo.
        sink: Sink alternativo (ex.: `MemorySink` em testes).
        options: Tokens reservados.

    Returns:
        ExportReport: Resultado individual de cada par, na ordem enviada.
    """
    opts = options or DenvarOptions()
    env = env or opts.default_export_environment
    if sink is None:
        sink = HerokuSink(remote or opts.default_remote)

    source = Path(path) if path is not None else discover_env_file(Path.cwd(), options=opts)
    engine = ResolutionEngine(ConfigStore(source, options=opts), options=opts)
    return push_pairs(engine, env, sink)
