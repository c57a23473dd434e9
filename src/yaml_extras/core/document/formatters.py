# src/yaml_extras/core/document/formatters.py
"""
Hooks de formatação do Documenter (v1)

Objetivo:
- Transformar valores já renderizados em texto final.
- NÃO percorre a árvore (isso é papel do Documenter).
- NÃO guarda estado: cada hook é uma função pura dos seus argumentos.

Presets:
- INLINE   → listas como `[a, b, c]` (padrão)
- BLOCK    → listas multilinha com `- `
- MARKDOWN → bullets Markdown aninhados
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..tree import ValueType


@dataclass(frozen=True)
class EntryArgs:
    """Argumentos de `format_entry` (uma chave de mapping)."""
    key: str
    type_label: str
    description: Optional[str]
    value: str
    indent: str
    path: Tuple[str, ...]


@dataclass(frozen=True)
class ContainerArgs:
    """Argumentos de `format_mapping` / `format_list`."""
    entries: Sequence[str]
    indent: str
    path: Tuple[str, ...]


TypeLabelFn = Callable[[ValueType], str]
EntryFn = Callable[[EntryArgs], str]
ContainerFn = Callable[[ContainerArgs], str]


# -----------------------------
# Padrão
# -----------------------------
_UNLABELED = frozenset({ValueType.NULL, ValueType.MAPPING, ValueType.TAGGED})


def default_type_label(value_type: ValueType) -> str:
    if value_type in _UNLABELED:
        return ""
    return f" ({value_type.value})"


def default_format_entry(args: EntryArgs) -> str:
    out = ""
    if args.description is not None:
        out += f"{args.indent}# {args.description}\n"
    return out + f"{args.indent}{args.key}{args.type_label}: {args.value}"


def default_format_mapping(args: ContainerArgs) -> str:
    body = "\n".join(args.entries)
    # fora da raiz o bloco começa na linha seguinte à chave pai
    return f"\n{body}" if args.path else body


def inline_format_list(args: ContainerArgs) -> str:
    return "[" + ", ".join(args.entries) + "]"


def block_format_list(args: ContainerArgs) -> str:
    return "".join(f"\n{args.indent}- {entry}" for entry in args.entries)


# -----------------------------
# Markdown
# -----------------------------
def markdown_type_label(value_type: ValueType) -> str:
    if value_type in _UNLABELED:
        return ""
    return f" _{value_type.value}_"


def markdown_format_entry(args: EntryArgs) -> str:
    line = f"{args.indent}- **{args.key}**{args.type_label}"
    if not args.value.startswith("\n"):
        line += f": `{args.value}`"
    if args.description is not None:
        line += f" ({args.description})"
    if args.value.startswith("\n"):
        line += args.value
    return line


def markdown_format_mapping(args: ContainerArgs) -> str:
    body = "\n".join(args.entries)
    return f"\n{body}" if args.path else body


def markdown_format_list(args: ContainerArgs) -> str:
    return ", ".join(args.entries)


# -----------------------------
# Presets
# -----------------------------
@dataclass(frozen=True)
class FormatPreset:
    """Conjunto nomeado de hooks, aplicável via `Documenter.with_preset`."""
    name: str
    type_label: TypeLabelFn
    format_entry: EntryFn
    format_mapping: ContainerFn
    format_list: ContainerFn


INLINE = FormatPreset(
    name="inline",
    type_label=default_type_label,
    format_entry=default_format_entry,
    format_mapping=default_format_mapping,
    format_list=inline_format_list,
)

BLOCK = FormatPreset(
    name="block",
    type_label=default_type_label,
    format_entry=default_format_entry,
    format_mapping=default_format_mapping,
    format_list=block_format_list,
)

MARKDOWN = FormatPreset(
    name="markdown",
    type_label=markdown_type_label,
    format_entry=markdown_format_entry,
    format_mapping=markdown_format_mapping,
    format_list=markdown_format_list,
)

PRESETS = {p.name: p for p in (INLINE, BLOCK, MARKDOWN)}


def get_preset(name: str) -> FormatPreset:
    if name not in PRESETS:
        raise KeyError(f"Preset desconhecido: {name!r} (disponíveis: {sorted(PRESETS)})")
    return PRESETS[name]
