# src/override_compiler/core/config/__init__.py
"""
Camada de configuração do compilador de overrides.

Este pacote carrega, mescla e valida a configuração do compilador,
produzindo `CompilerSettings`, a estrutura imutável que o compilador
recebe explicitamente.

A configuração é:
    - declarativa
    - determinística
    - separada das definições do projeto (interface)

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge estrito
    - Materialização e validação de `CompilerSettings`

Limites explícitos:
    - Não carrega a interface do projeto
    - Não compila overrides
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import DEFAULTS_PATH, load_config, load_settings  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import CompilerSettings, settings_from_config  # noqa: F401
