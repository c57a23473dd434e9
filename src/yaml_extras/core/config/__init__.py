# src/yaml_extras/core/config/__init__.py

"""
Camada de configuração.

Carrega documentos YAML/JSON do disco, reestrutura chaves pontuadas e
resolve defaults + overrides locais via deep-merge.

Invariantes:
    - A configuração final é sempre um mapping (dict)
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, load_document

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "load_config",
    "load_document",
]
