# src/override_compiler/core/compiler/builtin.py
"""
Registro de tarefas embutidas (sintéticas).

Tarefas embutidas não existem na interface do projeto: são declaradas no
arquivo `builtin_tasks.yaml` empacotado e mapeadas para uma ação customizada
fixa do motor de automação. Cada uma carrega seu próprio catálogo de opções.

O registro é carregado uma única vez (lazy) e é somente leitura.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml  # PyYAML

from ..interface.errors import InterfaceValidationError
from ..interface.schema import parse_option_catalog, parse_task_definition
from ..interface.types import OptionDefinition, TaskDefinition


BUILTIN_TASKS_PATH = Path(__file__).with_name("builtin_tasks.yaml")


@dataclass(frozen=True)
class BuiltinTask:
    """Tarefa embutida: definição da tarefa + catálogo privado de opções."""

    task: TaskDefinition
    options: Dict[str, OptionDefinition]
    icon: Optional[str] = None

    @property
    def task_name(self) -> str:
        return self.task.name

    @property
    def entry(self) -> str:
        return self.task.entry


def _parse_registry(data: Any) -> Dict[str, BuiltinTask]:
    if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
        raise InterfaceValidationError("builtin registry must define a `tasks` list")

    registry: Dict[str, BuiltinTask] = {}
    for i, raw in enumerate(data["tasks"]):
        where = f"tasks[{i}]"
        if not isinstance(raw, dict):
            raise InterfaceValidationError(f"{where} must be a mapping")
        task = parse_task_definition(raw.get("task"), f"{where}.task")
        if task.name in registry:
            raise InterfaceValidationError(f"duplicate builtin task: {task.name}")
        registry[task.name] = BuiltinTask(
            task=task,
            options=parse_option_catalog(raw.get("option"), f"{where}.option"),
            icon=raw.get("icon"),
        )
    return registry


@lru_cache(maxsize=1)
def _registry() -> Dict[str, BuiltinTask]:
    with BUILTIN_TASKS_PATH.open("r", encoding="utf-8") as f:
        return _parse_registry(yaml.safe_load(f))


def is_builtin_task(task_name: str) -> bool:
    return task_name in _registry()


def get_builtin_task(task_name: str) -> Optional[BuiltinTask]:
    return _registry().get(task_name)


def list_builtin_tasks() -> Tuple[BuiltinTask, ...]:
    """Tarefas embutidas na ordem declarada."""
    return tuple(_registry().values())


def find_builtin_option(option_key: str) -> Optional[OptionDefinition]:
    """Procura uma chave de opção em todos os catálogos embutidos."""
    for builtin in _registry().values():
        definition = builtin.options.get(option_key)
        if definition is not None:
            return definition
    return None
