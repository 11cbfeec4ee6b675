"""Override Compiler — core.

Subpacotes:
    - config: settings do compilador (defaults + overrides locais)
    - interface: modelo e carregamento da interface do projeto
    - options: motor de opções (defaults, cases, templates, coleta, merge)
    - compiler: orquestração e serialização do documento final
"""
