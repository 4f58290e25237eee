# src/denvar/cli.py
"""
CLI do Denvar.

Uso:
    denvar --create|-c [json|npmrc] [PATH]
    denvar --export-heroku|-exph [ENVIRONMENT] [REMOTE]
    denvar --help|-h

A CLI é apenas um adapter: interpreta argumentos, chama a fachada do
pacote e decide o código de saída a partir dos resultados.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from .bootstrap.sample import create_env_file
from .core.errors import DenvarError, EnvFileCreationError
from .core.options import DenvarOptions
from .export.exporter import export_environment


def build_parser(options: DenvarOptions) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="denvar",
        description="Variáveis de ambiente por ambiente a partir de env.json.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--create",
        "-c",
        nargs="*",
        metavar="ARG",
        help="cria um arquivo de exemplo: [json|npmrc] [PATH] (default: json .)",
    )
    group.add_argument(
        "--export-heroku",
        "-exph",
        dest="export_heroku",
        nargs="*",
        metavar="ARG",
        help=(
            "exporta um ambiente para o Heroku: [ENVIRONMENT] [REMOTE] "
            f"(default: {options.default_export_environment} {options.default_remote})"
        ),
    )
    return parser


def _positional(values: List[str], parser: argparse.ArgumentParser, flag: str) -> List[Optional[str]]:
    if len(values) > 2:
        parser.error(f"{flag} aceita no máximo 2 argumentos, recebido: {len(values)}")
    return list(values) + [None] * (2 - len(values))


def run_create(file_type: Optional[str], directory: Optional[str]) -> int:
    try:
        created = create_env_file(file_type or "json", directory)
    except EnvFileCreationError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1
    print(f'"{created}" foi criado com sucesso.')
    return 0


def run_export(env: Optional[str], remote: Optional[str], options: DenvarOptions) -> int:
    try:
        report = export_environment(env, remote, options=options)
    except DenvarError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return 1

    for outcome in report.outcomes:
        if outcome.ok:
            print(f"  ok    {outcome.layer}.{outcome.key}")
        else:
            print(f"  falha {outcome.layer}.{outcome.key}: {outcome.error}", file=sys.stderr)

    print(
        f"{report.environment} → {report.remote}: "
        f"{len(report.succeeded)} exportadas, {len(report.failed)} falharam"
    )
    return 0 if report.ok else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = DenvarOptions()
    parser = build_parser(options)
    args = parser.parse_args(argv)

    if args.create is not None:
        file_type, directory = _positional(args.create, parser, "--create")
        return run_create(file_type, directory)

    if args.export_heroku is not None:
        env, remote = _positional(args.export_heroku, parser, "--export-heroku")
        return run_export(env, remote, options)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
