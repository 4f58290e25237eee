# src/denvar/export/sink.py
"""
Sinks remotos de configuração.

Um sink recebe um único par chave/valor por chamada de `write` e levanta
`ExportWriteError` quando a escrita falha. Ele não conhece camadas nem
ambientes: a ordem e a política best-effort são do exportador.

Implementações:
    - HerokuSink → `heroku config:set KEY=VALUE --remote <remote>`
    - MemorySink → gravação em memória, com falhas simuladas por chave

Decisões arquiteturais:
    - O comando externo é executado sem shell (argv em lista), de modo
      que valores com espaços ou metacaracteres chegam intactos
    - Cada escrita é síncrona e termina antes da próxima começar
"""

from __future__ import annotations

import subprocess
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from ..core.errors import ExportWriteError


@runtime_checkable
class RemoteConfigSink(Protocol):
    remote: str

    def write(self, key: str, value: str) -> None:
        ...


class HerokuSink:
    """
    Sink que grava variáveis via Heroku CLI.

    Args:
        remote: Remote git usado no deploy (ex.: `heroku`, `staging`).
        executable: Executável da CLI; configurável para wrappers.
        timeout: Timeout em segundos de cada chamada; None espera indefinidamente.
    """

    def __init__(self, remote: str = "heroku", *, executable: str = "heroku", timeout: Optional[float] = None):
        self.remote = remote
        self.executable = executable
        self.timeout = timeout

    def command(self, key: str, value: str) -> List[str]:
        return [self.executable, "config:set", f"{key}={value}", "--remote", self.remote]

    def write(self, key: str, value: str) -> None:
        try:
            completed = subprocess.run(
                self.command(key, value),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ExportWriteError(key, f"executável '{self.executable}' não encontrado") from e
        except OSError as e:
            # sem permissão de execução, ENOEXEC etc.
            raise ExportWriteError(key, f"não foi possível executar '{self.executable}': {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ExportWriteError(key, f"timeout após {self.timeout}s") from e

        if completed.returncode != 0:
            reason = (completed.stderr or "").strip() or f"exit code {completed.returncode}"
            raise ExportWriteError(key, reason)


class MemorySink:
    """Sink em memória; `failing_keys` simula falhas de escrita por chave."""

    def __init__(self, remote: str = "memory", *, failing_keys: Iterable[str] = ()):
        self.remote = remote
        self.failing_keys = set(failing_keys)
        self.writes: List[Tuple[str, str]] = []
        self.attempts: List[str] = []

    def write(self, key: str, value: str) -> None:
        self.attempts.append(key)
        if key in self.failing_keys:
            raise ExportWriteError(key, "falha simulada")
        self.writes.append((key, value))

    @property
    def state(self) -> dict:
        # última escrita vence, como no armazenamento remoto
        return dict(self.writes)
