# src/override_compiler/core/compiler/compiler.py
"""
Compilador de pipeline_override.

Transforma uma `SelectedTask` (valores atuais das opções) e a interface do
projeto em um documento JSON (array de fragmentos) entregue, de forma opaca,
ao motor de automação.

Estratégias:
    - builtin: tarefa com nome reservado e ausente da interface do projeto.
      Todos os fragmentos são fundidos (deep merge) em um único objeto e o
      documento é um array de um elemento.
    - project: tarefa declarada na interface. Os fragmentos são emitidos sem
      merge, na ordem de precedência:

          task.pipeline_override < global_option < resource.option
          < controller.option < task.option

      O motor aplica o array em ordem, com sobrescrita rasa por campo.

Garantias:
    - Determinismo: mesmas entradas produzem o mesmo texto, byte a byte
    - Entradas nunca são mutadas
    - Nenhuma falha de dados é propagada; o resultado é sempre um array JSON
      válido (possivelmente vazio)
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config.settings import CompilerSettings
from ..context import CompileContext
from ..errors import missing_definition, no_project_or_task
from ..interface.types import OptionDefinition, OptionValue, ProjectInterface, SelectedTask
from ..options.collector import collect_option_overrides
from ..options.merge import merge_fragments
from .builtin import get_builtin_task
from .hashing import compute_override_hash

logger = logging.getLogger(__name__)

Fragment = Dict[str, Any]

STRATEGY_BUILTIN = "builtin"
STRATEGY_PROJECT = "project"


@dataclass(frozen=True)
class CompileResult:
    """Documento compilado acompanhado do relatório da compilação."""

    document: str
    fragments: List[Fragment]
    strategy: str
    override_hash: str
    context: CompileContext

    @property
    def warnings(self) -> Dict[str, List[str]]:
        return self.context.warnings


def serialize_fragments(fragments: List[Fragment], *, settings: CompilerSettings) -> str:
    """JSON compacto, sem ordenar chaves."""
    return json.dumps(
        fragments, ensure_ascii=settings.ensure_ascii, allow_nan=False, separators=(",", ":")
    )


def _collect_scope(
    keys: Iterable[str],
    values: Mapping[str, OptionValue],
    catalog: Mapping[str, OptionDefinition],
    fragments: List[Fragment],
    ctx: CompileContext,
    settings: CompilerSettings,
) -> None:
    for key in keys:
        collect_option_overrides(key, values, catalog, fragments, ctx=ctx, settings=settings)


def _builtin_fragments(
    selected_task: SelectedTask, ctx: CompileContext, settings: CompilerSettings
) -> List[Fragment]:
    builtin = get_builtin_task(selected_task.task_name)
    if builtin is None:
        ctx.add_diagnostic(
            scope=selected_task.task_name,
            payload=missing_definition(kind="task", name=selected_task.task_name, scope="builtin"),
        )
        logger.warning("builtin task not registered: %s", selected_task.task_name)
        return []

    collected: List[Fragment] = []
    if builtin.task.pipeline_override is not None:
        collected.append(builtin.task.pipeline_override)
    _collect_scope(
        builtin.task.option, selected_task.option_values, builtin.options, collected, ctx, settings
    )

    if not collected:
        return []
    return [merge_fragments(collected)]


def _project_fragments(
    selected_task: SelectedTask,
    project: Optional[ProjectInterface],
    controller_name: Optional[str],
    resource_name: Optional[str],
    ctx: CompileContext,
    settings: CompilerSettings,
) -> List[Fragment]:
    task_name = selected_task.task_name
    task = project.find_task(task_name) if project is not None else None
    if task is None:
        ctx.add_diagnostic(
            scope=task_name,
            payload=no_project_or_task(task_name=task_name, project_loaded=project is not None),
        )
        logger.warning("no project or task for %s", task_name)
        return []

    fragments: List[Fragment] = []
    if task.pipeline_override is not None:
        fragments.append(copy.deepcopy(task.pipeline_override))

    catalog = project.option
    if not catalog:
        return fragments

    values = selected_task.option_values
    _collect_scope(project.global_option, values, catalog, fragments, ctx, settings)

    if resource_name:
        resource = project.find_resource(resource_name)
        if resource is None:
            ctx.add_diagnostic(
                scope=task_name,
                payload=missing_definition(kind="resource", name=resource_name, scope="resource"),
            )
        else:
            _collect_scope(resource.option, values, catalog, fragments, ctx, settings)

    if controller_name:
        controller = project.find_controller(controller_name)
        if controller is None:
            ctx.add_diagnostic(
                scope=task_name,
                payload=missing_definition(kind="controller", name=controller_name, scope="controller"),
            )
        else:
            _collect_scope(controller.option, values, catalog, fragments, ctx, settings)

    _collect_scope(task.option, values, catalog, fragments, ctx, settings)
    return fragments


def compile_task_with_report(
    selected_task: SelectedTask,
    project: Optional[ProjectInterface],
    controller_name: Optional[str] = None,
    resource_name: Optional[str] = None,
    *,
    settings: Optional[CompilerSettings] = None,
) -> CompileResult:
    """Compila a tarefa e retorna o documento com fragmentos, estratégia e diagnósticos."""
    settings = settings if settings is not None else CompilerSettings()
    task_name = selected_task.task_name
    ctx = CompileContext.new(task_name=task_name)

    builtin = settings.is_reserved_task_name(task_name) and (
        project is None or project.find_task(task_name) is None
    )
    strategy = STRATEGY_BUILTIN if builtin else STRATEGY_PROJECT
    logger.debug("compiling %s with %s strategy", task_name, strategy)
    ctx.log(scope=task_name, level="debug", message="compile started", strategy=strategy)

    if builtin:
        fragments = _builtin_fragments(selected_task, ctx, settings)
    else:
        fragments = _project_fragments(
            selected_task, project, controller_name, resource_name, ctx, settings
        )

    document = serialize_fragments(fragments, settings=settings)
    ctx.log(
        scope=task_name,
        level="info",
        message="compile finished",
        strategy=strategy,
        fragments=len(fragments),
    )
    return CompileResult(
        document=document,
        fragments=fragments,
        strategy=strategy,
        override_hash=compute_override_hash(document),
        context=ctx,
    )


def compile_task(
    selected_task: SelectedTask,
    project: Optional[ProjectInterface],
    controller_name: Optional[str] = None,
    resource_name: Optional[str] = None,
    *,
    settings: Optional[CompilerSettings] = None,
) -> str:
    """Compila a tarefa selecionada e retorna o documento (array JSON em texto)."""
    return compile_task_with_report(
        selected_task, project, controller_name, resource_name, settings=settings
    ).document
