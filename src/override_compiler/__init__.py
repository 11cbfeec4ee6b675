# src/override_compiler/__init__.py
"""
Override Compiler — resolução de árvores de opções e compilação de pipeline_override.

Este pacote transforma a configuração declarativa de uma tarefa (opções
aninhadas escolhidas pelo usuário) em um único documento JSON, ordenado e
pronto para ser aplicado por um motor de automação externo.

Princípios centrais:
    - A compilação é determinística, síncrona e sem I/O
    - Definições (interface do projeto) são imutáveis
    - Valores das opções pertencem à camada de estado; o compilador só lê
    - Falhas de dados viram diagnósticos, nunca exceções para o chamador

Arquitetura em alto nível:
    - core.config    → settings do compilador (defaults YAML + override local)
    - core.interface → modelo, validação e carregamento da interface do projeto
    - core.options   → defaults, cases, templates, coleta e merge de fragmentos
    - core.compiler  → orquestração por escopo e serialização

Limites explícitos:
    - Não renderiza UI nem persiste instâncias/tarefas
    - Não valida compatibilidade entre tarefas, recursos e controladores
    - Não executa o documento compilado
"""

from .core.compiler import (
    CompileResult,
    compile_task,
    compile_task_with_report,
    get_builtin_task,
    is_builtin_task,
    list_builtin_tasks,
)
from .core.config import CompilerSettings, load_settings
from .core.interface import (
    ProjectInterface,
    SelectedTask,
    load_project_interface,
    selected_task_from_dict,
    validate_project_interface,
)
from .core.options import (
    collect_option_overrides,
    default_option_value,
    initialize_option_values,
    merge_fragments,
    set_option_value,
    substitute,
)

__all__ = [
    "CompileResult",
    "CompilerSettings",
    "ProjectInterface",
    "SelectedTask",
    "collect_option_overrides",
    "compile_task",
    "compile_task_with_report",
    "default_option_value",
    "get_builtin_task",
    "initialize_option_values",
    "is_builtin_task",
    "list_builtin_tasks",
    "load_project_interface",
    "load_settings",
    "merge_fragments",
    "selected_task_from_dict",
    "set_option_value",
    "substitute",
    "validate_project_interface",
]
