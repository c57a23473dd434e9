# tests/conftest.py
"""
Fixtures compartilhados para testes do yaml-extras.

Este módulo define documentos YAML mínimos e determinísticos usados
pelos testes de restructure, merge, document e config.

Decisões arquiteturais:
    - Documentos são fornecidos como string (sem I/O)
    - O parse é feito pelos próprios testes, via `parse_text`

Invariantes:
    - Nenhuma fixture executa transformações
    - Todos os YAMLs são sintaticamente válidos
"""

import pytest


# =====================================================
# Restructure
# =====================================================

@pytest.fixture
def nested_yaml() -> str:
    """Documento já aninhado, equivalente a `dotted_yaml`."""
    return """\
foo:
  bar:
    baz: 42
"""


@pytest.fixture
def dotted_yaml() -> str:
    """Documento com chave pontuada, equivalente a `nested_yaml`."""
    return "foo.bar.baz: 42\n"


# =====================================================
# Document
# =====================================================

@pytest.fixture
def animal_yaml() -> str:
    """
    Valores padrão de uma estrutura de opções com escalares,
    mappings aninhados e listas.
    """
    return """\
foo: 42
bar: true
animal:
  cat:
    legs: 4
    say: ["Nyaaah", "Meow", "rrrrr"]
  ant:
    legs: 6
"""


@pytest.fixture
def animal_description_yaml() -> str:
    """Árvore de descrições paralela a `animal_yaml`."""
    return """\
animal:
  __description__: An animal
  cat: The best animal
  ant: An insect
"""


# =====================================================
# Config
# =====================================================

@pytest.fixture
def config_defaults_yaml() -> str:
    """Defaults com estrutura aninhada convencional."""
    return """\
compiler:
  command: cargo build
  flags: ["--release"]
output:
  dir: build
"""


@pytest.fixture
def config_local_yaml() -> str:
    """Override local escrito com chaves pontuadas."""
    return """\
compiler.command: make
output.format: pdf
"""
