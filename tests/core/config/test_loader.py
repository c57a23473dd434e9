# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_document / load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório e o local é opcional
- chaves pontuadas são reestruturadas antes do merge
- formatos e tipos raiz inválidos são rejeitados

Limites explícitos:
    - Não valida a política de merge em detalhe (ver tests/core/merge)
"""

import json
from pathlib import Path

import pytest

try:
    from yaml_extras.core.config.loader import load_config, load_document
    from yaml_extras.core.config.errors import (
        ConfigFileNotFoundError,
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
    from yaml_extras.core.errors import MergeError, ParseError, RestructureError
    from yaml_extras.core.restructure import Restructurer
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader e suas exceções tipadas estejam disponíveis para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/yaml_extras/core/config/loader.py (load_config, load_document)\n"
            "- src/yaml_extras/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"))


def test_load_document_restructures_dotted_keys(tmp_path: Path, config_local_yaml):
    _require_imports()
    path = tmp_path / "local.yaml"
    path.write_text(config_local_yaml, encoding="utf-8")

    out = load_document(str(path))
    assert out == {"compiler": {"command": "make"}, "output": {"format": "pdf"}}


def test_load_document_honours_custom_restructurer(tmp_path: Path):
    _require_imports()
    path = tmp_path / "doc.yml"
    path.write_text("log.level: debug\nsome.key.x: 1\n", encoding="utf-8")

    out = load_document(str(path), restructurer=Restructurer().with_ignore("some.key"))
    assert out == {"log": {"level": "debug"}, "some.key": {"x": 1}}


def test_load_document_json(tmp_path: Path):
    _require_imports()
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"a.b": 1, "c": {"d.e": 2}}), encoding="utf-8")

    assert load_document(str(path)) == {"a": {"b": 1}, "c": {"d": {"e": 2}}}


def test_empty_file_is_empty_mapping(tmp_path: Path):
    _require_imports()
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_document(str(path)) == {}


def test_load_defaults_and_dotted_local(tmp_path: Path, config_defaults_yaml, config_local_yaml):
    """
    Verifica que o override local pontuado é aplicado sobre defaults aninhados.

    Invariantes:
        - Overrides locais têm precedência
        - Chaves não sobrescritas permanecem
        - Chaves novas do override são adicionadas no sub-mapping correto
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(config_defaults_yaml, encoding="utf-8")
    local.write_text(config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out == {
        "compiler": {"command": "make", "flags": ["--release"]},
        "output": {"dir": "build", "format": "pdf"},
    }


def test_missing_local_is_ok(tmp_path: Path, config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "nope.yaml"))
    assert out["compiler"]["command"] == "cargo build"


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("engine = { fail_fast = true }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


def test_restructure_conflict_in_file_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "bad.yaml"
    path.write_text("foo: 1\nfoo.bar: 2\n", encoding="utf-8")
    with pytest.raises(RestructureError):
        load_document(str(path))


def test_local_mapping_over_default_scalar_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text("output: build\n", encoding="utf-8")
    local.write_text("output.dir: dist\n", encoding="utf-8")
    with pytest.raises(MergeError):
        load_config(defaults_path=str(defaults), local_path=str(local))


def test_load_document_missing_file_is_not_a_defaults_error(tmp_path: Path):
    """
    Verifica que `load_document` usa o erro neutro de arquivo ausente.

    Invariantes:
        - `DefaultsNotFoundError` é exclusivo do arquivo de defaults em `load_config`
        - Ambos continuam capturáveis como `ConfigFileNotFoundError`
    """
    _require_imports()
    with pytest.raises(ConfigFileNotFoundError) as exc:
        load_document(str(tmp_path / "other.yaml"))
    assert not isinstance(exc.value, DefaultsNotFoundError)

    with pytest.raises(ConfigFileNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"))


def test_malformed_json_raises_parse_error(tmp_path: Path):
    """
    Verifica que JSON inválido gera o mesmo `ParseError` que YAML inválido.

    Invariantes:
        - O erro original do `json` é encadeado via `__cause__`
        - O payload identifica o arquivo
    """
    _require_imports()
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ParseError) as exc:
        load_document(str(path))
    assert isinstance(exc.value.__cause__, json.JSONDecodeError)
    assert exc.value.details["path"] == str(path)


def test_malformed_yaml_raises_parse_error(tmp_path: Path):
    _require_imports()
    path = tmp_path / "bad.yaml"
    path.write_text("a: [1, 2\n", encoding="utf-8")
    with pytest.raises(ParseError):
        load_document(str(path))
