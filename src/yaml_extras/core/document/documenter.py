# src/yaml_extras/core/document/documenter.py
"""
Documentação de árvores em texto anotado.

O Documenter percorre uma árvore (tipicamente a representação dos valores
padrão de uma estrutura de opções) e, opcionalmente, uma árvore paralela
de descrições, produzindo uma representação legível no estilo YAML:

    # Description for foo
    foo:
        # Description for bar
        bar (Number): 42

Árvore de descrições:
    - String  → descrição direta da chave
    - Mapping → descrição no campo `description_field` (padrão
      `__description__`) + descrições das chaves internas
    - outro   → ignorado

Decisões arquiteturais:
    - Toda a formatação passa por quatro hooks puros (ver `formatters`)
    - A indentação é derivada da profundidade do path a cada chamada;
      não existe contador mutável compartilhado
    - O Documenter é imutável e pode ser reutilizado (inclusive entre threads)

Limites explícitos:
    - Não muta a árvore nem as descrições
    - A tag de valores `Tagged` não é renderizada
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from ..tree import LIST_MARKER, Tagged, Tree, value_type
from ..yaml_io import parse_text, serialize_scalar
from .formatters import (
    ContainerArgs,
    ContainerFn,
    EntryArgs,
    EntryFn,
    FormatPreset,
    TypeLabelFn,
    default_format_entry,
    default_format_mapping,
    default_type_label,
    inline_format_list,
)


DEFAULT_INDENT = "    "
DEFAULT_DESCRIPTION_FIELD = "__description__"


def _key_display(key: Any) -> str:
    return key if isinstance(key, str) else repr(key)


@dataclass(frozen=True)
class Documenter:
    """
    Opções de documentação.

    Construído via builder:

        Documenter().with_indent("\\t").with_preset(BLOCK)
    """

    indent: str = DEFAULT_INDENT
    description_field: str = DEFAULT_DESCRIPTION_FIELD
    type_label: TypeLabelFn = default_type_label
    format_entry: EntryFn = default_format_entry
    format_mapping: ContainerFn = default_format_mapping
    format_list: ContainerFn = inline_format_list

    # -----------------------------
    # Builder
    # -----------------------------
    def with_indent(self, indent: str) -> "Documenter":
        return replace(self, indent=indent)

    def with_description_field(self, field_name: str) -> "Documenter":
        """
        Altera o campo que descreve um mapping. Só é necessário quando a
        própria estrutura documentada possui uma chave `__description__`.
        """
        return replace(self, description_field=field_name)

    def with_type_label(self, fn: TypeLabelFn) -> "Documenter":
        return replace(self, type_label=fn)

    def with_format_entry(self, fn: EntryFn) -> "Documenter":
        return replace(self, format_entry=fn)

    def with_format_mapping(self, fn: ContainerFn) -> "Documenter":
        return replace(self, format_mapping=fn)

    def with_format_list(self, fn: ContainerFn) -> "Documenter":
        return replace(self, format_list=fn)

    def with_preset(self, preset: FormatPreset) -> "Documenter":
        return replace(
            self,
            type_label=preset.type_label,
            format_entry=preset.format_entry,
            format_mapping=preset.format_mapping,
            format_list=preset.format_list,
        )

    # -----------------------------
    # Operações
    # -----------------------------
    def apply(self, value: Tree, description: Optional[Tree] = None) -> str:
        """
        Renderiza `value` anotado com `description`.

        Raises:
            SerializeError: Se algum escalar não puder ser convertido em texto.
        """
        return self._render(value, description, ())

    def apply_text(self, text: str, description_text: Optional[str] = None) -> str:
        """
        Faz o parse do valor (e das descrições, se houver) e renderiza.

        Raises:
            ParseError: Se algum dos textos não for YAML válido.
            SerializeError: Ver `apply`.
        """
        value = parse_text(text)
        description = parse_text(description_text) if description_text is not None else None
        return self.apply(value, description)

    # -----------------------------
    # Internos
    # -----------------------------
    def _indent_for(self, path: Tuple[str, ...]) -> str:
        return self.indent * len(path)

    def _describe(self, entry: Any) -> Tuple[Optional[str], Optional[Tree]]:
        """Retorna (descrição, sub-árvore de descrições) de uma entrada."""
        if isinstance(entry, str):
            return entry, None
        if isinstance(entry, dict):
            text = entry.get(self.description_field)
            return (text if isinstance(text, str) else None), entry
        return None, None

    def _render(self, node: Tree, description: Optional[Tree], path: Tuple[str, ...]) -> str:
        if isinstance(node, dict):
            return self._render_mapping(node, description, path)
        if isinstance(node, list):
            return self._render_list(node, path)
        if isinstance(node, Tagged):
            return self._render(node.value, description, path)
        return serialize_scalar(node)

    def _render_mapping(self, node: dict, description: Optional[Tree], path: Tuple[str, ...]) -> str:
        indent = self._indent_for(path)
        descriptions = description if isinstance(description, dict) else {}

        entries: List[str] = []
        for key, child in node.items():
            text, sub_description = self._describe(descriptions.get(key))
            key_str = _key_display(key)
            rendered = self._render(child, sub_description, path + (key_str,))
            entries.append(
                self.format_entry(
                    EntryArgs(
                        key=key_str,
                        type_label=self.type_label(value_type(child)),
                        description=text,
                        value=rendered,
                        indent=indent,
                        path=path,
                    )
                )
            )

        return self.format_mapping(ContainerArgs(entries=entries, indent=indent, path=path))

    def _render_list(self, node: list, path: Tuple[str, ...]) -> str:
        child_path = path + (LIST_MARKER,)
        entries = [self._render(item, None, child_path) for item in node]
        return self.format_list(
            ContainerArgs(entries=entries, indent=self._indent_for(path), path=path)
        )


def document(value: Tree, description: Optional[Tree] = None) -> str:
    """Renderiza `value` com o Documenter padrão."""
    return Documenter().apply(value, description)
