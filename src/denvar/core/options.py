# src/denvar/core/options.py
"""
Opções e tokens reservados do Denvar.

Este módulo concentra, em uma única estrutura imutável, todas as strings
reservadas que governam a resolução de configuração: o nome da camada
comum, o namespace e os tokens de grupo das variáveis codificadas por
prefixo, os nomes padrão de arquivos e os ambientes/remotes padrão.

As opções são passadas explicitamente ao `ConfigStore`, ao
`ResolutionEngine` e ao exportador no momento da construção, em vez de
ficarem espalhadas como constantes no código.

Decisões arquiteturais:
    - A estrutura é `frozen`: opções não mudam durante uma resolução
    - Os defaults reproduzem o comportamento histórico da ferramenta
    - Tokens vazios são rejeitados na construção

Invariantes:
    - `npm_prefix(grupo)` sempre termina com `separator`
    - `env_files` sempre contém a chave `json`

Limites explícitos:
    - Não lê variáveis de ambiente para se auto-configurar
    - Não valida nomes de ambiente (são strings livres)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .errors import InvalidOptionsError


def _default_env_files() -> Dict[str, str]:
    return {"json": "env.json", "npmrc": ".npmrc"}


@dataclass(frozen=True)
class DenvarOptions:
    """
    Tokens reservados e defaults da resolução de configuração.

    Campos:
        - common_key: chave da camada comum no arquivo (`common`)
        - npm_namespace: namespace das variáveis codificadas (`npm_config`)
        - npm_common_prefix: token de grupo da camada comum (`C`)
        - separator: separador entre namespace, grupo e resto (`_`)
        - env_files: arquivo padrão por tipo (`json`, `npmrc`)
        - fallback_env_files: nomes alternativos aceitos na descoberta (`.env`)
        - default_environment: ambiente usado por `load` (`development`)
        - default_export_environment: ambiente usado na exportação (`production`)
        - default_remote: remote usado na exportação (`heroku`)
        - encoding: encoding de leitura do arquivo fonte
    """

    common_key: str = "common"
    npm_namespace: str = "npm_config"
    npm_common_prefix: str = "C"
    separator: str = "_"
    env_files: Dict[str, str] = field(default_factory=_default_env_files)
    fallback_env_files: Tuple[str, ...] = (".env",)
    default_environment: str = "development"
    default_export_environment: str = "production"
    default_remote: str = "heroku"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        for name in (
            "common_key",
            "npm_namespace",
            "npm_common_prefix",
            "separator",
            "default_environment",
            "default_export_environment",
            "default_remote",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidOptionsError(
                    f"Opção '{name}' deve ser string não vazia, recebido: {value!r}"
                )

        if "json" not in self.env_files:
            raise InvalidOptionsError("Opção 'env_files' deve declarar o tipo 'json'")

    def npm_prefix(self, group: str) -> str:
        """Prefixo completo de um grupo, ex.: `npm_config_C_`."""
        return f"{self.npm_namespace}{self.separator}{group}{self.separator}"

    def env_file_for(self, file_type: str) -> str:
        """Nome do arquivo padrão de um tipo; tipos desconhecidos caem em `json`."""
        return self.env_files.get(file_type, self.env_files["json"])
