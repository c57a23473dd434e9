"""
Core do yaml-extras.

Reúne as transformações sobre a árvore de documento:
    - tree        → modelo da árvore (Tagged, ValueType)
    - yaml_io     → parse de texto e serialização de escalares (PyYAML)
    - restructure → chaves pontuadas em sub-mappings
    - merge       → deep-merge com override
    - document    → renderização anotada com hooks plugáveis
    - config      → carregamento de arquivos de configuração
    - errors      → taxonomia de erros compartilhada

As transformações não dependem umas das outras; apenas `config`
combina restructure e merge.
"""
