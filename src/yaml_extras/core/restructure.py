# src/yaml_extras/core/restructure.py
"""
Reestruturação de chaves pontuadas em sub-mappings aninhados.

Permite que um documento de configuração aceite indistintamente:

    compiler:
      command: cargo build

e:

    compiler.command: cargo build

Política de split (v1):
    - Apenas chaves string são consideradas
    - O split ocorre no **primeiro** `.`; chaves como `.foo` ou `foo.` ficam intactas
    - Prefixos da ignore-list são tratados como um único segmento, mesmo
      contendo pontos (primeira correspondência em ordem de registro vence)
    - Um prefixo de destino que já existe e não é mapping é conflito (erro)

Princípios fundamentais:
    - As chaves elegíveis são capturadas em snapshot antes de qualquer mutação
    - O Restructurer é imutável e não guarda estado entre chamadas
    - Aplicar duas vezes é o mesmo que aplicar uma vez

Limites explícitos:
    - Não há transação: uma falha pode deixar chaves anteriores já movidas
    - Valores `Tagged` não são visitados
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import RestructureError
from .tree import Tree
from .yaml_io import parse_text


logger = logging.getLogger(__name__)

SEPARATOR = "."


def _is_dotted(key: Any) -> bool:
    if not isinstance(key, str):
        return False
    idx = key.find(SEPARATOR)
    return 0 < idx < len(key) - 1


@dataclass(frozen=True)
class Restructurer:
    """
    Opções de reestruturação.

    Construído via builder:

        Restructurer().with_recursive(False).with_ignore("some.key")

    Campos:
        recursive: aplica a transformação também a mappings aninhados (padrão True)
        ignore: prefixos pontuados que não devem ser divididos
    """

    recursive: bool = True
    ignore: Tuple[str, ...] = ()

    # -----------------------------
    # Builder
    # -----------------------------
    def with_recursive(self, recursive: bool) -> "Restructurer":
        return replace(self, recursive=recursive)

    def with_ignore(self, *prefixes: str) -> "Restructurer":
        """Substitui a ignore-list."""
        return replace(self, ignore=tuple(prefixes))

    def add_ignore(self, *prefixes: str) -> "Restructurer":
        """Acrescenta prefixos ao final da ignore-list."""
        return replace(self, ignore=self.ignore + tuple(prefixes))

    # -----------------------------
    # Operações
    # -----------------------------
    def apply(self, tree: Tree) -> None:
        """
        Reestrutura `tree` in-place.

        Raises:
            RestructureError: Se `tree` não for um mapping, ou se um prefixo
                de destino já existir com valor que não é mapping.
        """
        if not isinstance(tree, dict):
            raise RestructureError(
                "não é um mapping",
                details={"found": type(tree).__name__},
                hint="A reestruturação só se aplica a mappings.",
            )

        dotted_keys: List[str] = [k for k in tree if _is_dotted(k)]
        for key in dotted_keys:
            self._restructure_key(tree, key)

        if self.recursive:
            nested_keys = [k for k, v in tree.items() if isinstance(v, dict)]
            for key in nested_keys:
                self.apply(tree[key])

    def apply_text(self, text: str) -> Tree:
        """
        Faz o parse de `text` e reestrutura o resultado.

        Raises:
            ParseError: Se o texto não for YAML válido.
            RestructureError: Ver `apply`.
        """
        value = parse_text(text)
        self.apply(value)
        return value

    # -----------------------------
    # Internos
    # -----------------------------
    def _split(self, key: str) -> Optional[Tuple[str, str]]:
        for ignored in self.ignore:
            if not key.startswith(ignored):
                continue
            if key == ignored:
                return None
            marker = ignored + SEPARATOR
            if key.startswith(marker):
                return ignored, key[len(marker):]

        prefix, sep, suffix = key.partition(SEPARATOR)
        if not sep:
            return None
        return prefix, suffix

    def _restructure_key(self, mapping: Dict[Any, Any], key: str) -> None:
        split = self._split(key)
        if split is None:
            return

        prefix, suffix = split
        if not prefix or not suffix:
            return

        if prefix in mapping and not isinstance(mapping[prefix], dict):
            raise RestructureError(
                f"não foi possível inserir a chave '{key}': '{prefix}' não é um mapping",
                details={"key": key, "prefix": prefix},
                hint="Remova o valor escalar em conflito ou renomeie a chave pontuada.",
            )

        value = mapping.pop(key)
        inner = mapping.setdefault(prefix, {})
        inner[suffix] = value
        logger.debug("chave '%s' movida para '%s' -> '%s'", key, prefix, suffix)

        self._restructure_key(inner, suffix)


def restructure(value: Tree, *, recursive: bool = True, ignore: Iterable[str] = ()) -> Tree:
    """
    Versão funcional: devolve uma cópia reestruturada, sem mutar `value`.

    Raises:
        RestructureError: Ver `Restructurer.apply`.
    """
    result = copy.deepcopy(value)
    Restructurer(recursive=recursive, ignore=tuple(ignore)).apply(result)
    return result
