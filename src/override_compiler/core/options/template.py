# src/override_compiler/core/options/template.py
"""
Template Substitution Unit.

Materializa o `pipeline_override` de uma opção input a partir dos valores
informados pelo usuário.

A substituição percorre a árvore já parseada do template (não o texto
serializado). Para cada campo, na ordem declarada, o placeholder `{nome}`
é tratado assim:

    - string folha igual ao placeholder  -> valor nativo do campo
      (int -> número, bool -> true/false, string -> texto)
    - string contendo o placeholder      -> substituição textual
    - chave de objeto                    -> substituição textual; uma chave
      que é exatamente o placeholder de um campo int/bool é inválida

Coerção por `pipeline_type`:
    - int: texto bruto (ou `int_fallback` quando vazio) parseado como número JSON
    - bool: verdadeiro se o texto, sem diferenciar maiúsculas, for
      "true", "1", "yes" ou "y"; falso caso contrário
    - string: texto bruto

Falhas são sinalizadas por `TemplateSubstitutionError` em `render_template`;
`substitute` é a variante que falha fechada e retorna None.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config.settings import CompilerSettings
from ..exceptions import TemplateSubstitutionError
from ..interface.types import InputField, InputOption, PipelineType

logger = logging.getLogger(__name__)


_BOOL_TRUE = {"true", "1", "yes", "y"}


def effective_raw_value(field: InputField, values: Mapping[str, str]) -> str:
    """Valor informado se não vazio; senão o default declarado; senão ""."""
    raw = values.get(field.name)
    if raw:
        return raw
    return field.default or ""


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-finite number: {token}")


def _coerce_int(raw: str, settings: CompilerSettings) -> Tuple[str, Any]:
    text = raw or settings.int_fallback
    try:
        native = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise TemplateSubstitutionError(
            message=f"value is not a number: {text!r}",
            details={"value": text, "reason": str(e)},
        ) from e
    if isinstance(native, bool) or not isinstance(native, (int, float)):
        raise TemplateSubstitutionError(
            message=f"value is not a number: {text!r}",
            details={"value": text},
        )
    return text, native


def _coerce_bool(raw: str) -> Tuple[str, Any]:
    flag = raw.lower() in _BOOL_TRUE
    return ("true" if flag else "false"), flag


def _substitution(
    field: InputField, raw: str, settings: CompilerSettings
) -> Tuple[str, Any, bool]:
    """Retorna (texto, nativo, exige_nativo) para um campo.

    Para campos int, o nativo só é validado quando o placeholder aparece
    como folha inteira; ocorrências parciais usam apenas o texto.
    """
    if field.pipeline_type is PipelineType.BOOL:
        text, native = _coerce_bool(raw)
        return text, native, True
    if field.pipeline_type is PipelineType.INT:
        return raw or settings.int_fallback, None, True
    return raw, raw, False


class _FieldPass:
    def __init__(self, field: InputField, raw: str, settings: CompilerSettings):
        self.field = field
        self.placeholder = "{" + field.name + "}"
        self.text, self._native, self.typed = _substitution(field, raw, settings)
        self._settings = settings

    def native(self) -> Any:
        if self.field.pipeline_type is PipelineType.INT:
            return _coerce_int(self.text, self._settings)[1]
        return self._native

    def key(self, key: str) -> str:
        if self.typed and key == self.placeholder:
            raise TemplateSubstitutionError(
                message=f"placeholder {self.placeholder} cannot be used as an object key",
                details={"field": self.field.name, "pipeline_type": self.field.pipeline_type.value},
            )
        return key.replace(self.placeholder, self.text)

    def apply(self, node: Any) -> Any:
        if isinstance(node, dict):
            return {self.key(k): self.apply(v) for k, v in node.items()}
        if isinstance(node, list):
            return [self.apply(item) for item in node]
        if isinstance(node, str):
            if node == self.placeholder:
                return self.native()
            if self.placeholder in node:
                return node.replace(self.placeholder, self.text)
        return node


def render_template(
    template: Mapping[str, Any],
    fields: Sequence[InputField],
    values: Mapping[str, str],
    *,
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, Any]:
    """Aplica os campos ao template e retorna um fragmento novo.

    Raises:
        TemplateSubstitutionError: se o template não for um objeto JSON ou se
            algum valor não puder ser coagido ao `pipeline_type` declarado.
    """
    if not isinstance(template, Mapping):
        raise TemplateSubstitutionError(
            message="template must be a JSON object",
            details={"type": type(template).__name__},
        )
    settings = settings if settings is not None else CompilerSettings()

    fragment: Any = copy.deepcopy(dict(template))
    for field in fields:
        raw = effective_raw_value(field, values)
        try:
            fragment = _FieldPass(field, raw, settings).apply(fragment)
        except TemplateSubstitutionError as e:
            raise TemplateSubstitutionError(
                message=f"field '{field.name}': {e.message}",
                details={**e.details, "field": field.name},
                hint=e.hint,
            ) from e

    # O fragmento precisa continuar representável como JSON.
    try:
        json.dumps(fragment, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise TemplateSubstitutionError(
            message="substituted template is not valid JSON",
            details={"reason": str(e)},
        ) from e
    return fragment


def substitute(
    template: Mapping[str, Any],
    fields: Sequence[InputField],
    values: Mapping[str, str],
    *,
    settings: Optional[CompilerSettings] = None,
) -> Optional[Dict[str, Any]]:
    """Variante de `render_template` que falha fechada (retorna None)."""
    try:
        return render_template(template, fields, values, settings=settings)
    except TemplateSubstitutionError as e:
        logger.warning("template substitution failed: %s", e.message)
        return None


def find_invalid_inputs(definition: InputOption, values: Mapping[str, str]) -> Tuple[str, ...]:
    """Campos cujo valor efetivo não atende ao padrão `verify`.

    Um padrão que não compila conta como inválido para o campo.
    """
    invalid: List[str] = []
    for field in definition.inputs:
        if not field.verify:
            continue
        try:
            ok = re.search(field.verify, effective_raw_value(field, values)) is not None
        except re.error:
            ok = False
        if not ok:
            invalid.append(field.name)
    return tuple(invalid)
