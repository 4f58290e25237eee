# tests/bootstrap/test_sample_files.py
"""
Testes de criação de arquivos de exemplo e descoberta do arquivo de ambiente.

Os testes asseguram que:
- os exemplos empacotados são copiados para o destino
- arquivos existentes nunca são sobrescritos
- a descoberta prefere `env.json`, depois `.env`
"""

import json

import pytest

from denvar.bootstrap.sample import create_env_file, discover_env_file
from denvar.core.errors import EnvFileCreationError
from denvar.core.store import ConfigStore


def test_create_json_sample(tmp_path):
    created = create_env_file("json", tmp_path)

    assert created == tmp_path / "env.json"
    document = json.loads(created.read_text(encoding="utf-8"))
    assert "common" in document
    assert "development" in document


def test_json_sample_is_loadable(tmp_path):
    layers = ConfigStore(create_env_file("json", tmp_path)).read("production")
    assert "production" in layers


def test_create_npmrc_sample(tmp_path):
    created = create_env_file("npmrc", tmp_path)
    assert created.name == ".npmrc"
    assert "C_" in created.read_text(encoding="utf-8")


def test_unknown_type_falls_back_to_json(tmp_path):
    assert create_env_file("xml", tmp_path).name == "env.json"


def test_non_directory_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    created = create_env_file("json", tmp_path / "does-not-exist")
    assert created.resolve() == (tmp_path / "env.json").resolve()


def test_existing_file_is_never_overwritten(tmp_path):
    target = tmp_path / "env.json"
    target.write_text("{}", encoding="utf-8")

    with pytest.raises(EnvFileCreationError, match="já existe"):
        create_env_file("json", tmp_path)

    assert target.read_text(encoding="utf-8") == "{}"


def test_discover_prefers_env_json(tmp_path):
    (tmp_path / "env.json").write_text("{}", encoding="utf-8")
    (tmp_path / ".env").write_text("{}", encoding="utf-8")
    assert discover_env_file(tmp_path) == tmp_path / "env.json"


def test_discover_falls_back_to_dotenv(tmp_path):
    (tmp_path / ".env").write_text("{}", encoding="utf-8")
    assert discover_env_file(tmp_path) == tmp_path / ".env"


def test_discover_without_files_returns_default_path(tmp_path):
    found = discover_env_file(tmp_path)
    assert found == tmp_path / "env.json"
    assert not found.exists()


def test_discover_can_create_sample(tmp_path):
    found = discover_env_file(tmp_path, create_missing=True)
    assert found == tmp_path / "env.json"
    assert found.is_file()
