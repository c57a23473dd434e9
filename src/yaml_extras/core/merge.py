# src/yaml_extras/core/merge.py
"""
Deep-merge de árvores com semântica de override.

Política de merge (v1):
    - valor de `other` que é mapping + chave existente → merge recursivo
    - valor de `other` que é mapping + chave ausente   → inserção (cópia)
    - qualquer outro valor de `other`                  → sobrescrita direta (cópia)

Decisões arquiteturais:
    - A recursão não verifica previamente o tipo do lado de `value`: se ele
      guardar um não-mapping onde `other` guarda um mapping, a chamada
      recursiva falha com o mesmo `MergeError` do nível raiz
    - Listas não são mescladas elemento a elemento

Limites explícitos:
    - Não trata estruturas cíclicas
    - Não realiza coerção de tipos
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict

from .errors import MergeError
from .tree import Tree


logger = logging.getLogger(__name__)


def merge(value: Tree, other: Tree) -> None:
    """
    Mescla `other` dentro de `value`, in-place.

    Args:
        value: Árvore de destino (menor prioridade), mutada.
        other: Árvore de override (maior prioridade), nunca mutada.

    Raises:
        MergeError: Se algum dos dois não for mapping no ponto de comparação.
    """
    if not isinstance(value, dict) or not isinstance(other, dict):
        raise MergeError(
            f"ambos os argumentos precisam ser mappings, recebido: "
            f"{type(value).__name__} e {type(other).__name__}",
            details={"value": type(value).__name__, "other": type(other).__name__},
        )

    for key, other_value in other.items():
        if isinstance(other_value, dict) and key in value:
            merge(value[key], other_value)
            continue

        value[key] = copy.deepcopy(other_value)
        logger.debug("merge: chave '%s' definida a partir do override", key)


def merged(value: Tree, other: Tree) -> Dict[Any, Any]:
    """
    Versão funcional de `merge`: nenhum input é mutado.

    Raises:
        MergeError: Ver `merge`.
    """
    result = copy.deepcopy(value)
    merge(result, other)
    return result
