"""Compilador de pipeline_override e registro de tarefas embutidas."""

from .builtin import (  # noqa: F401
    BUILTIN_TASKS_PATH,
    BuiltinTask,
    find_builtin_option,
    get_builtin_task,
    is_builtin_task,
    list_builtin_tasks,
)
from .compiler import (  # noqa: F401
    STRATEGY_BUILTIN,
    STRATEGY_PROJECT,
    CompileResult,
    compile_task,
    compile_task_with_report,
    serialize_fragments,
)
from .hashing import compute_override_hash  # noqa: F401
