# src/yaml_extras/core/tree.py
"""
Modelo canônico da árvore de documento.

A árvore é representada com tipos Python nativos, exatamente como o
PyYAML os produz:

    - Null     → None
    - Bool     → bool
    - Number   → int | float
    - String   → str (timestamps YAML: datetime.date / datetime.datetime)
    - Sequence → list
    - Mapping  → dict (ordem de inserção preservada)
    - Tagged   → Tagged(tag, value)

Apenas `Tagged` exige um tipo próprio, pois o Python não possui
equivalente nativo para um valor acompanhado de tag YAML.

Invariantes:
    - Chaves de um mapping são únicas (garantido por `dict`)
    - A ordem de inserção é semanticamente visível na renderização
    - `bool` nunca é classificado como Number

Limites explícitos:
    - Não faz parse nem serialização (ver `yaml_io`)
    - Não valida schema
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union


# Segmento de path usado para elementos de sequência
LIST_MARKER = "-"


@dataclass(frozen=True)
class Tagged:
    """Valor acompanhado de uma tag YAML local (ex.: `!env HOME`)."""

    tag: str
    value: Any


Tree = Union[None, bool, int, float, str, datetime.date, List[Any], Dict[Any, Any], Tagged]


class ValueType(str, Enum):
    """
    Espelho das variantes da árvore, usado apenas para escolher o rótulo
    de tipo na documentação.

    Os valores textuais são os nomes exibidos pelo rótulo padrão
    (`" (Number)"`, `" (List)"`, ...).
    """

    NULL = "Null"
    BOOL = "Bool"
    NUMBER = "Number"
    STRING = "String"
    LIST = "List"
    MAPPING = "Mapping"
    TAGGED = "Tagged"


def value_type(node: Any) -> ValueType:
    """
    Classifica um nó da árvore.

    Raises:
        TypeError: Se o nó não pertence a nenhuma variante suportada.
    """
    # bool antes de int: bool é subclasse de int
    if node is None:
        return ValueType.NULL
    if isinstance(node, bool):
        return ValueType.BOOL
    if isinstance(node, (int, float)):
        return ValueType.NUMBER
    if isinstance(node, (str, datetime.date)):
        return ValueType.STRING
    if isinstance(node, list):
        return ValueType.LIST
    if isinstance(node, dict):
        return ValueType.MAPPING
    if isinstance(node, Tagged):
        return ValueType.TAGGED

    raise TypeError(f"Tipo de nó não suportado: {type(node).__name__}")