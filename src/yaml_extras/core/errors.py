"""
yaml-extras — Estruturas canônicas de erro (v1)

Este módulo define a taxonomia de erros compartilhada pelas três
transformações da biblioteca (restructure, merge, document) e pela
camada de parse/serialização.

Erros são:

- explícitos
- tipados por operação
- serializáveis (payload estruturado)

Nenhum erro é silenciado: toda falha é devolvida ao chamador imediato,
sem retry e sem rollback de mutações parciais.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

RESTRUCTURE_ERROR = "RESTRUCTURE_ERROR"
MERGE_ERROR = "MERGE_ERROR"
PARSE_ERROR = "PARSE_ERROR"
SERIALIZE_ERROR = "SERIALIZE_ERROR"
CONFIG_ERROR = "CONFIG_ERROR"


# ---------------------------------------------------------------------------
# Exceções
# ---------------------------------------------------------------------------

class YamlExtrasError(Exception):
    """
    Exceção base da biblioteca.

    Importante:
    - `details` carrega apenas dados estruturados (nunca a árvore inteira)
    - a mensagem é curta e humana
    - `code` é estável e identifica a família do erro
    """

    code: str = "YAML_EXTRAS_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


class RestructureError(YamlExtrasError):
    """Chave pontuada não pôde ser convertida em sub-mapping."""

    code = RESTRUCTURE_ERROR


class MergeError(YamlExtrasError):
    """Um dos lados do merge não é um mapping no ponto de comparação."""

    code = MERGE_ERROR


class ParseError(YamlExtrasError):
    """Texto de entrada não pôde ser convertido em árvore."""

    code = PARSE_ERROR


class SerializeError(YamlExtrasError):
    """Escalar não pôde ser convertido em texto."""

    code = SERIALIZE_ERROR
