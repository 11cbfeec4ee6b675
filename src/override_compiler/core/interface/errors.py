"""Erros canônicos do domínio de Interface (definição do projeto).

A interface do projeto é a entrada declarativa do compilador: catálogo de
opções, tarefas, recursos e controladores. Falhas de carregamento/validação
devem produzir erros explícitos e estáveis, antes de qualquer compilação.
"""


class InterfaceError(Exception):
    """Erro base do domínio de interface."""


class InterfacePathMissingError(InterfaceError):
    """Nenhum caminho de interface foi informado."""


class InterfaceFileNotFoundError(InterfaceError):
    """Arquivo de interface não existe no caminho informado."""


class UnsupportedInterfaceFormatError(InterfaceError):
    """Formato de interface não suportado (v1: JSON/YAML)."""


class InterfaceParseError(InterfaceError):
    """Falha ao parsear JSON/YAML."""


class InterfaceValidationError(InterfaceError):
    """Interface (ou valor de opção) não é estruturalmente válida segundo o schema canônico."""
