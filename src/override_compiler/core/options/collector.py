# src/override_compiler/core/options/collector.py
"""
Override Collector.

Percorre o valor *atual* de uma opção, resolve o case (ou template) ativo,
acrescenta o fragmento correspondente à lista de saída e desce nas opções
filhas desbloqueadas.

Regras por tipo:
    - checkbox: cases na ordem declarada (não na ordem de clique); sem
      recursão em filhos
    - select/switch: case resolvido por `cases.resolve_case`; recursão nas
      chaves filhas do case, com os mesmos valores e a mesma lista
    - input: template materializado por `template.render_template`

Nenhuma falha é propagada: definições ausentes, cases inexistentes e
templates inválidos viram diagnósticos no `CompileContext` (quando
fornecido) e a contribuição é omitida ou degradada.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ..config.settings import CompilerSettings
from ..context import CompileContext
from ..errors import (
    DiagnosticPayload,
    case_resolution_fallback,
    input_verify_failed,
    missing_definition,
    template_parse_failure,
)
from ..exceptions import TemplateSubstitutionError
from ..interface.types import (
    CheckboxOption,
    InputOption,
    OptionDefinition,
    OptionKind,
    OptionValue,
)
from .cases import resolve_case
from .defaults import effective_value
from .template import effective_raw_value, find_invalid_inputs, render_template

logger = logging.getLogger(__name__)

Fragment = Dict[str, Any]


def _report(ctx: Optional[CompileContext], key: str, payload: DiagnosticPayload) -> None:
    logger.warning("%s: %s", key, payload.message)
    if ctx is not None:
        ctx.add_diagnostic(scope=key, payload=payload)


def _collect_checkbox(definition: CheckboxOption, value: OptionValue, fragments: List[Fragment]) -> None:
    selected = set(value.case_names)
    for case in definition.cases:
        if case.name in selected and case.pipeline_override is not None:
            fragments.append(copy.deepcopy(case.pipeline_override))


def _collect_input(
    key: str,
    definition: InputOption,
    value: OptionValue,
    fragments: List[Fragment],
    ctx: Optional[CompileContext],
    settings: CompilerSettings,
) -> None:
    if definition.pipeline_override is None:
        return

    for name in find_invalid_inputs(definition, value.values):
        field = next(f for f in definition.inputs if f.name == name)
        _report(
            ctx,
            key,
            input_verify_failed(
                option_key=key,
                field=name,
                pattern=field.verify or "",
                value=effective_raw_value(field, value.values),
            ),
        )

    try:
        fragment = render_template(
            definition.pipeline_override, definition.inputs, value.values, settings=settings
        )
    except TemplateSubstitutionError as e:
        _report(
            ctx,
            key,
            template_parse_failure(
                option_key=key,
                reason=e.message,
                fields=[f.name for f in definition.inputs],
            ),
        )
        return
    fragments.append(fragment)


def collect_option_overrides(
    key: str,
    values: Mapping[str, OptionValue],
    catalog: Mapping[str, OptionDefinition],
    fragments: List[Fragment],
    *,
    ctx: Optional[CompileContext] = None,
    settings: Optional[CompilerSettings] = None,
    _path: FrozenSet[str] = frozenset(),
) -> None:
    """Acrescenta a `fragments` as contribuições da opção `key` e de suas filhas.

    `values` nunca é mutado. Uma chave ausente em `values` (ou com tipo
    divergente da definição) usa o valor padrão da definição.
    """
    settings = settings if settings is not None else CompilerSettings()

    definition = catalog.get(key)
    if definition is None:
        _report(ctx, key, missing_definition(kind="option", name=key))
        return

    if key in _path:
        logger.warning("option cycle detected at %s", key)
        if ctx is not None:
            ctx.add_warning(scope=key, message=f"option cycle detected at '{key}', nested walk stopped")
        return

    stored = values.get(key)
    value = effective_value(definition, stored, settings=settings)
    kind = definition.kind

    if kind is OptionKind.CHECKBOX:
        _collect_checkbox(definition, value, fragments)
        return

    if kind is OptionKind.INPUT:
        _collect_input(key, definition, value, fragments, ctx, settings)
        return

    resolution = resolve_case(definition, value, settings)
    if resolution.fell_back and stored is not None:
        _report(
            ctx,
            key,
            case_resolution_fallback(
                option_key=key,
                requested=resolution.requested,
                resolved=resolution.case.name if resolution.case else None,
            ),
        )

    case = resolution.case
    if case is None:
        return
    if case.pipeline_override is not None:
        fragments.append(copy.deepcopy(case.pipeline_override))

    path = _path | {key}
    for child in case.option:
        collect_option_overrides(
            child, values, catalog, fragments, ctx=ctx, settings=settings, _path=path
        )
