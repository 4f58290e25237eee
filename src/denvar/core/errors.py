# src/denvar/core/errors.py
"""
Exceções canônicas do Denvar.

Este módulo define a hierarquia oficial de exceções levantadas durante a
leitura do arquivo de ambiente, a seleção de camadas, a exportação para
sinks remotos e a criação de arquivos de exemplo.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Mensagens carregam contexto suficiente para diagnóstico
      (caminho do arquivo, nome do ambiente, chave)
    - Valores de variáveis nunca entram em mensagens de erro

Invariantes:
    - Todas as exceções do pacote herdam de `DenvarError`
    - Erros estruturais do arquivo herdam de `ConfigParseError`

Limites explícitos:
    - Não decide código de saída do processo (responsabilidade da CLI)
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from typing import Optional


class DenvarError(Exception):
    """
    Exceção base para erros do Denvar.

    Permite captura genérica de qualquer falha do pacote, distinguindo-a
    de erros inesperados de programação.
    """


class InvalidOptionsError(DenvarError):
    """Opções de construção (`DenvarOptions`) inválidas."""


class SourceNotFoundError(DenvarError):
    """
    Exceção levantada quando o arquivo de ambiente não existe ou não pode
    ser lido.

    Decisões arquiteturais:
        - A ausência do arquivo aborta a resolução antes de qualquer merge
        - O arquivo não é criado implicitamente neste ponto
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        message = f"Arquivo de ambiente não encontrado ou ilegível: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigParseError(DenvarError):
    """
    Exceção levantada quando o conteúdo do arquivo não é um documento
    estruturado bem formado (JSON ou YAML).

    Também é a base dos erros estruturais (formato, tipo raiz, tipo de
    camada), que tornam o documento inutilizável mesmo quando sintaticamente
    válido.
    """


class UnsupportedConfigFormatError(ConfigParseError):
    """
    Extensão de arquivo não suportada.

    Formatos suportados:
        - JSON (.json, .env)
        - YAML (.yaml, .yml)
    """


class InvalidConfigRootTypeError(ConfigParseError):
    """O conteúdo raiz do documento não é um mapa ambiente → variáveis."""


class InvalidLayerTypeError(ConfigParseError):
    """Uma camada selecionada (`common` ou `<env>`) não é um mapa plano."""


class MissingEnvironmentError(DenvarError):
    """
    Exceção levantada quando o ambiente solicitado não existe no arquivo.

    A mensagem nomeia sempre o ambiente ausente e o caminho do arquivo,
    ambos também disponíveis como atributos.

    Invariantes:
        - Nenhuma variável é escrita no espaço alvo quando este erro ocorre
    """

    def __init__(self, environment: str, path: str):
        self.environment = environment
        self.path = path
        super().__init__(
            f'Nenhum objeto "{environment}" no arquivo {path}. '
            "Declare as variáveis desse ambiente no arquivo de configuração."
        )


class ExportWriteError(DenvarError):
    """
    Falha ao escrever um único par chave/valor em um sink remoto.

    Não é fatal para a exportação: o exportador registra a falha e segue
    para o próximo par.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Falha ao exportar '{key}': {reason}")


class EnvFileCreationError(DenvarError):
    """Falha ao criar um arquivo de exemplo (destino existente ou cópia falhou)."""
