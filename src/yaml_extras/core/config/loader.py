# src/yaml_extras/core/config/loader.py
"""
Loader de documentos de configuração com chaves pontuadas.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Cada arquivo é reestruturado antes do merge, de modo que
`compiler.command: x` no override local substitui corretamente
`compiler: {command: y}` nos defaults.

Princípios fundamentais:
    - Erros estruturais são tratados como falhas fatais
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida semântica de domínio
    - Não aplica defaults implícitos
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import ParseError
from ..merge import merged
from ..restructure import Restructurer
from ..yaml_io import parse_text
from .errors import (
    ConfigFileNotFoundError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


logger = logging.getLogger(__name__)


def _read(path: Path) -> Any:
    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        return parse_text(path.read_text(encoding="utf-8"))

    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ParseError(
                    "Falha ao interpretar texto JSON",
                    details={"path": str(path), "reason": str(e)},
                    hint="Verifique a sintaxe do documento de entrada.",
                ) from e

    raise UnsupportedConfigFormatError(
        f"Formato não suportado: {path.suffix}",
        details={"path": str(path)},
        hint="Use arquivos .yaml, .yml ou .json.",
    )


def load_document(path: str, *, restructurer: Optional[Restructurer] = None) -> Dict[Any, Any]:
    """
    Carrega um documento de configuração e reestrutura suas chaves pontuadas.

    Arquivos vazios são interpretados como mappings vazios.

    Args:
        path: Caminho do arquivo (.yaml, .yml ou .json).
        restructurer: Opções de reestruturação (padrão: `Restructurer()`).

    Returns:
        Dict[Any, Any]: Documento reestruturado.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um mapping.
        ParseError: Se o YAML ou JSON for inválido.
        RestructureError: Se houver conflito ao reestruturar.
    """
    file = Path(path)
    if not file.exists():
        raise ConfigFileNotFoundError(
            f"Arquivo de configuração não encontrado: {file}",
            details={"path": str(file)},
        )

    data = _read(file)
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser mapping, recebido: {type(data).__name__}",
            details={"path": str(file), "found": type(data).__name__},
        )

    (restructurer or Restructurer()).apply(data)
    logger.debug("documento carregado: %s (%d chaves)", file, len(data))
    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    restructurer: Optional[Restructurer] = None,
) -> Dict[Any, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; se o caminho não existir é ignorado
        - Quando presente, o local tem prioridade (`merged(defaults, local)`)

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se alguma raiz não for mapping.
        ParseError: Se algum arquivo tiver sintaxe inválida.
        RestructureError: Se houver conflito ao reestruturar.
        MergeError: Se o override tiver mapping onde o default tem escalar.
    """
    if not Path(defaults_path).exists():
        raise DefaultsNotFoundError(
            f"Arquivo de defaults não encontrado: {defaults_path}",
            details={"path": str(defaults_path)},
        )

    effective = load_document(defaults_path, restructurer=restructurer)

    if local_path is not None:
        if Path(local_path).exists():
            local = load_document(local_path, restructurer=restructurer)
            effective = merged(effective, local)
        else:
            logger.debug("override local ausente, ignorado: %s", local_path)

    return effective
