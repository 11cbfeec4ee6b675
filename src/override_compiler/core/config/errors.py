# src/override_compiler/core/config/errors.py
"""
Exceções canônicas da camada de configuração do compilador.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a materialização de `CompilerSettings`.

Diferente do motor de opções, a camada de configuração falha de forma
explícita: uma configuração inválida nunca chega ao compilador.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção deste módulo é levantada durante `compile_task`
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do compilador.

    Todas as exceções levantadas durante carregamento, merge e validação
    de settings devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    de configuração.

    Exemplo de conflito:
        - base:     {"compiler": {"ensure_ascii": false}}
        - override: {"compiler": "ascii"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a configuração resolvida não pode ser
    materializada em `CompilerSettings`.

    Exemplos:
        - `builtin_task_pattern` não é uma expressão regular válida
        - listas de aliases vazias ou com itens não textuais
    """
