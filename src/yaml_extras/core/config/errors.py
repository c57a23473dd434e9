# src/yaml_extras/core/config/errors.py
"""
Exceções da camada de configuração.

As exceções aqui definidas representam falhas estruturais ao carregar
documentos de configuração do disco, antes de qualquer reestruturação
ou merge.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `ConfigError` herda de `YamlExtrasError` e expõe o mesmo payload

Limites explícitos:
    - Erros de reestruturação e merge continuam sendo
      `RestructureError` / `MergeError`
"""

from ..errors import CONFIG_ERROR, YamlExtrasError


class ConfigError(YamlExtrasError):
    """
    Exceção base para erros de carregamento de configuração.

    Permite captura genérica de falhas de arquivo, formato e tipo raiz.
    """

    code = CONFIG_ERROR


class ConfigFileNotFoundError(ConfigError):
    """O arquivo de configuração informado não existe."""


class DefaultsNotFoundError(ConfigFileNotFoundError):
    """
    O arquivo de configuração base (defaults) não existe.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Nenhum default implícito é criado
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    O conteúdo raiz do documento não é um mapping.

    Listas ou escalares no root não podem ser reestruturados nem mesclados.
    """
