# src/yaml_extras/__init__.py
"""
yaml-extras — utilitários sobre a árvore de documentos YAML/JSON.

Três operações independentes:
    - Restructurer → converte chaves pontuadas (`foo.bar: 1`) em sub-mappings
    - merge        → deep-merge de duas árvores, com override
    - Documenter   → renderiza uma árvore + descrições em texto anotado

A árvore é a representação Python nativa produzida pelo PyYAML
(dict, list, str, int, float, bool, None), mais `Tagged` para tags locais.
"""
# src/yaml_extras/__init__.py
from .core.config import load_config, load_document
from .core.document import (
    BLOCK,
    INLINE,
    MARKDOWN,
    Documenter,
    document,
)
from .core.errors import (
    MergeError,
    ParseError,
    RestructureError,
    SerializeError,
    YamlExtrasError,
)
from .core.merge import merge, merged
from .core.restructure import Restructurer, restructure
from .core.tree import Tagged, ValueType
from .core.yaml_io import parse_text, serialize_scalar

__version__ = "0.1.0"

__all__ = [
    "BLOCK",
    "INLINE",
    "MARKDOWN",
    "Documenter",
    "document",
    "MergeError",
    "ParseError",
    "RestructureError",
    "SerializeError",
    "YamlExtrasError",
    "merge",
    "merged",
    "Restructurer",
    "restructure",
    "Tagged",
    "ValueType",
    "parse_text",
    "serialize_scalar",
    "load_config",
    "load_document",
]
