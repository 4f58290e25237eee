# tests/test_facade.py
"""Testes da fachada pública (`denvar.load`, `denvar.get_npm_config`)."""

import json
import os

import denvar
from denvar import EnvironTarget, MemoryTarget, ResolutionStatus


def test_load_into_process_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("DENVAR_FACADE_A", raising=False)
    monkeypatch.setenv("DENVAR_FACADE_B", "external")
    path = tmp_path / "env.json"
    path.write_text(
        json.dumps({"development": {"DENVAR_FACADE_A": "1", "DENVAR_FACADE_B": "file"}}),
        encoding="utf-8",
    )

    result = denvar.load(path=path)

    assert result.status is ResolutionStatus.APPLIED
    assert os.environ["DENVAR_FACADE_A"] == "1"
    assert os.environ["DENVAR_FACADE_B"] == "external"
    monkeypatch.delenv("DENVAR_FACADE_A")


def test_load_discovers_and_bootstraps_sample(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = MemoryTarget()

    result = denvar.load("test", target=target)

    assert (tmp_path / "env.json").is_file()
    assert result.ok
    assert target.get("NODE_ENV") == "test"


def test_load_reads_dotenv_when_no_env_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(json.dumps({"development": {"A": "1"}}), encoding="utf-8")
    backing = {}

    result = denvar.load(target=EnvironTarget(backing))

    assert result.source.endswith(".env")
    assert backing == {"A": "1"}
    assert not (tmp_path / "env.json").exists()


def test_load_failure_is_a_result(tmp_path):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"production": {}}), encoding="utf-8")

    result = denvar.load("development", path=path, target=MemoryTarget())

    assert result.status is ResolutionStatus.FAILED
    assert isinstance(result.error, denvar.MissingEnvironmentError)


def test_get_npm_config_reads_process_environment(monkeypatch):
    monkeypatch.setenv("npm_config_C_DENVAR_COMMON", "c")
    monkeypatch.setenv("npm_config_facade_DENVAR_ENV", "e")

    config = denvar.get_npm_config("facade")

    assert config["DENVAR_COMMON"] == "c"
    assert config["DENVAR_ENV"] == "e"


def test_get_npm_config_with_explicit_source():
    assert denvar.get_npm_config("dev", {"npm_config_dev_X": "1"}) == {"X": "1"}


def test_load_bootstrap_failure_is_a_result(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "env.json").mkdir()
    target = MemoryTarget({"KEEP": "me"})

    result = denvar.load(target=target)

    assert result.status is ResolutionStatus.FAILED
    assert isinstance(result.error, denvar.DenvarError)
    assert result.environment == "development"
    assert result.events[0]["event_type"] == "bootstrap_failed"
    assert target.as_dict() == {"KEEP": "me"}
