# src/yaml_extras/core/yaml_io.py
"""
Fronteira com o PyYAML: parse de texto em árvore e serialização de escalares.

Responsabilidades do módulo:
    - Converter texto YAML (ou JSON, subconjunto de YAML) em árvore
    - Preservar tags locais (`!tag`) como `Tagged`
    - Converter escalares em texto da mesma forma que o PyYAML os escreveria

Decisões arquiteturais:
    - O loader deriva de `yaml.SafeLoader`: nenhum objeto Python arbitrário
      é construído
    - Erros do PyYAML nunca vazam: são encadeados em `ParseError` /
      `SerializeError`

Limites explícitos:
    - Não reestrutura, não faz merge, não documenta
    - Não lê arquivos (ver `core.config.loader`)
"""

from __future__ import annotations

import datetime
from typing import Any

import yaml  # PyYAML

from .errors import ParseError, SerializeError
from .tree import Tagged, Tree


class TaggedLoader(yaml.SafeLoader):
    """SafeLoader que constrói `Tagged` para tags locais desconhecidas."""


def _construct_tagged(loader: TaggedLoader, tag_suffix: str, node: yaml.Node) -> Tagged:
    if isinstance(node, yaml.MappingNode):
        value: Any = loader.construct_mapping(node, deep=True)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_scalar(node)
    return Tagged(tag=f"!{tag_suffix}", value=value)


TaggedLoader.add_multi_constructor("!", _construct_tagged)


def parse_text(text: str) -> Tree:
    """
    Converte texto YAML em árvore.

    Documento vazio resulta em `None`.

    Raises:
        ParseError: Se o texto não for YAML válido.
    """
    try:
        return yaml.load(text, Loader=TaggedLoader)
    except yaml.YAMLError as e:
        raise ParseError(
            "Falha ao interpretar texto YAML",
            details={"reason": str(e)},
            hint="Verifique a sintaxe do documento de entrada.",
        ) from e


def serialize_scalar(node: Tree) -> str:
    """
    Converte um escalar em texto.

    Strings são devolvidas verbatim; Null/Bool/Number seguem a
    representação do PyYAML (`null`, `true`, `42`, `1.5`, `.inf`,
    `2024-01-01`).

    Raises:
        SerializeError: Se o nó não for um escalar serializável.
    """
    if isinstance(node, str):
        return node

    if node is not None and not isinstance(node, (bool, int, float, datetime.date)):
        raise SerializeError(
            f"Valor não é um escalar serializável: {type(node).__name__}",
            details={"type": type(node).__name__},
        )

    try:
        dumped = yaml.safe_dump(node, default_flow_style=True)
    except yaml.YAMLError as e:
        raise SerializeError(
            "Falha ao serializar escalar",
            details={"reason": str(e)},
        ) from e

    # safe_dump de escalar produz "valor\n...\n"
    return dumped.split("\n", 1)[0]
