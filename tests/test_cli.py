# tests/test_cli.py
"""
Testes da CLI (`denvar.cli.main`).

A exportação é testada com `export_environment` substituído, de modo que
nenhum comando externo seja executado.
"""

import pytest

from denvar import cli
from denvar.core.errors import MissingEnvironmentError
from denvar.core.types import ExportOutcome, ExportReport


def test_no_args_prints_help(capsys):
    assert cli.main([]) == 0
    assert "--export-heroku" in capsys.readouterr().out


def test_help_flag_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--help"])
    assert exc_info.value.code == 0


def test_create_defaults_to_json_in_cwd(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert cli.main(["--create"]) == 0

    assert (tmp_path / "env.json").is_file()
    assert "criado com sucesso" in capsys.readouterr().out


def test_create_short_flag_with_type_and_path(tmp_path, capsys):
    assert cli.main(["-c", "npmrc", str(tmp_path)]) == 0
    assert (tmp_path / ".npmrc").is_file()


def test_create_existing_file_returns_error(tmp_path, capsys):
    (tmp_path / "env.json").write_text("{}", encoding="utf-8")

    assert cli.main(["-c", "json", str(tmp_path)]) == 1
    assert "já existe" in capsys.readouterr().err


def test_too_many_arguments_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-c", "json", ".", "extra"])
    assert exc_info.value.code == 2


def test_export_uses_defaults(monkeypatch, capsys):
    calls = []

    def fake_export(env, remote, **kwargs):
        calls.append((env, remote))
        return ExportReport(
            environment="production",
            remote="heroku",
            outcomes=(ExportOutcome(key="A", value="1", layer="common", ok=True),),
        )

    monkeypatch.setattr(cli, "export_environment", fake_export)

    assert cli.main(["-exph"]) == 0
    assert calls == [(None, None)]
    out = capsys.readouterr().out
    assert "common.A" in out
    assert "1 exportadas, 0 falharam" in out


def test_export_forwards_env_and_remote(monkeypatch):
    calls = []

    def fake_export(env, remote, **kwargs):
        calls.append((env, remote))
        return ExportReport(environment=env, remote=remote)

    monkeypatch.setattr(cli, "export_environment", fake_export)

    assert cli.main(["--export-heroku", "staging", "heroku-staging"]) == 0
    assert calls == [("staging", "heroku-staging")]


def test_export_with_failed_pair_exits_one(monkeypatch, capsys):
    report = ExportReport(
        environment="production",
        remote="heroku",
        outcomes=(ExportOutcome(key="A", value="1", layer="common", ok=False, error="boom"),),
    )
    monkeypatch.setattr(cli, "export_environment", lambda env, remote, **kw: report)

    assert cli.main(["-exph"]) == 1
    assert "common.A: boom" in capsys.readouterr().err


def test_export_store_error_exits_one(monkeypatch, capsys):
    def fake_export(env, remote, **kwargs):
        raise MissingEnvironmentError("production", "env.json")

    monkeypatch.setattr(cli, "export_environment", fake_export)

    assert cli.main(["-exph"]) == 1
    assert "production" in capsys.readouterr().err
