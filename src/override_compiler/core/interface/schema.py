"""
Schema canônico — Interface do projeto v1.

Valida o documento de interface (já parseado para dict) e o materializa
nas estruturas imutáveis de `types`. Também converte valores de opção entre
o formato persistido pela camada de estado e as dataclasses de valor.

Formato persistido dos valores de opção:
    {"type": "select",   "caseName": "..."}
    {"type": "switch",   "value": true}
    {"type": "checkbox", "caseNames": ["..."]}
    {"type": "input",    "values": {"campo": "texto"}}

Esta implementação evita dependências externas (ex.: Pydantic), seguindo o
mesmo estilo de validação explícita do restante do core.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import InterfaceValidationError
from .types import (
    Case,
    CheckboxOption,
    CheckboxValue,
    ControllerDefinition,
    InputField,
    InputOption,
    InputValue,
    OptionDefinition,
    OptionKind,
    OptionValue,
    PipelineType,
    ProjectInterface,
    ResourceDefinition,
    SelectedTask,
    SelectOption,
    SelectValue,
    SwitchOption,
    SwitchValue,
    TaskDefinition,
)


_ALLOWED_OPTION_TYPES = {k.value for k in OptionKind}
_ALLOWED_PIPELINE_TYPES = {t.value for t in PipelineType}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InterfaceValidationError(msg)


def _optional_str(raw: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = raw.get(key)
    _expect(value is None or isinstance(value, str), f"{where}.{key} must be a string")
    return value


def _override(raw: Dict[str, Any], where: str) -> Optional[Dict[str, Any]]:
    value = raw.get("pipeline_override")
    _expect(
        value is None or isinstance(value, dict),
        f"{where}.pipeline_override must be a mapping",
    )
    if value is not None:
        # YAML aceita datas, NaN e Infinity, que não existem em JSON
        try:
            json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise InterfaceValidationError(
                f"{where}.pipeline_override must contain only JSON values: {e}"
            ) from e
    return value


def _key_list(raw: Any, where: str) -> Tuple[str, ...]:
    if raw is None:
        return ()
    _expect(isinstance(raw, list), f"{where} must be a list of option keys")
    for i, key in enumerate(raw):
        _expect(_is_non_empty_str(key), f"{where}[{i}] must be a non-empty string")
    return tuple(raw)


def _text(value: Any) -> str:
    # JSON/YAML podem trazer defaults numéricos ou booleanos
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# -----------------------------
# Opções
# -----------------------------

def _case_name(value: Any) -> Any:
    # YAML 1.1 lê Yes/No sem aspas como booleanos
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return value


def _parse_cases(raw: Dict[str, Any], where: str) -> Tuple[Case, ...]:
    cases = raw.get("cases") or []
    _expect(isinstance(cases, list), f"{where}.cases must be a list")

    seen: set = set()
    parsed: List[Case] = []
    for i, c in enumerate(cases):
        cw = f"{where}.cases[{i}]"
        _expect(isinstance(c, dict), f"{cw} must be a mapping")
        name = _case_name(c.get("name"))
        _expect(_is_non_empty_str(name), f"{cw}.name is required")
        _expect(name not in seen, f"duplicate case name in {where}: {name}")
        seen.add(name)
        parsed.append(
            Case(
                name=name,
                pipeline_override=_override(c, cw),
                option=_key_list(c.get("option"), f"{cw}.option"),
                label=_optional_str(c, "label", cw),
                description=_optional_str(c, "description", cw),
            )
        )
    return tuple(parsed)


def _parse_inputs(raw: Dict[str, Any], where: str) -> Tuple[InputField, ...]:
    inputs = raw.get("inputs") or []
    _expect(isinstance(inputs, list), f"{where}.inputs must be a list")

    seen: set = set()
    parsed: List[InputField] = []
    for i, f in enumerate(inputs):
        fw = f"{where}.inputs[{i}]"
        _expect(isinstance(f, dict), f"{fw} must be a mapping")
        name = f.get("name")
        _expect(_is_non_empty_str(name), f"{fw}.name is required")
        _expect(name not in seen, f"duplicate input name in {where}: {name}")
        seen.add(name)

        # pipeline_type desconhecido é tratado como string
        ptype = f.get("pipeline_type") or PipelineType.STRING.value
        if not isinstance(ptype, str) or ptype not in _ALLOWED_PIPELINE_TYPES:
            ptype = PipelineType.STRING.value

        parsed.append(
            InputField(
                name=name,
                default=_text(f.get("default")),
                pipeline_type=PipelineType(ptype),
                verify=_optional_str(f, "verify", fw),
                pattern_msg=_optional_str(f, "pattern_msg", fw),
                label=_optional_str(f, "label", fw),
            )
        )
    return tuple(parsed)


def parse_option_definition(key: str, raw: Any) -> OptionDefinition:
    """Valida e materializa uma definição de opção do catálogo.

    Uma definição sem `type` é tratada como `select`.
    """
    where = f"option.{key}"
    _expect(isinstance(raw, dict), f"{where} must be a mapping")

    otype = raw.get("type") or OptionKind.SELECT.value
    _expect(
        isinstance(otype, str) and otype in _ALLOWED_OPTION_TYPES,
        f"{where}.type must be one of {sorted(_ALLOWED_OPTION_TYPES)}",
    )
    kind = OptionKind(otype)

    label = _optional_str(raw, "label", where)
    description = _optional_str(raw, "description", where)

    if kind is OptionKind.INPUT:
        return InputOption(
            inputs=_parse_inputs(raw, where),
            pipeline_override=_override(raw, where),
            label=label,
            description=description,
        )

    cases = _parse_cases(raw, where)
    if kind is OptionKind.CHECKBOX:
        return CheckboxOption(cases=cases, label=label, description=description)

    default_case = _case_name(raw.get("default_case"))
    _expect(
        default_case is None or isinstance(default_case, str),
        f"{where}.default_case must be a string",
    )
    if kind is OptionKind.SWITCH:
        return SwitchOption(cases=cases, default_case=default_case, label=label, description=description)
    return SelectOption(cases=cases, default_case=default_case, label=label, description=description)


def parse_option_catalog(raw: Any, where: str = "option") -> Dict[str, OptionDefinition]:
    if raw is None:
        return {}
    _expect(isinstance(raw, dict), f"{where} must be a mapping")
    catalog: Dict[str, OptionDefinition] = {}
    for key, definition in raw.items():
        _expect(_is_non_empty_str(key), f"{where} keys must be non-empty strings")
        catalog[key] = parse_option_definition(key, definition)
    return catalog


# -----------------------------
# Tarefas, recursos, controladores
# -----------------------------

def parse_task_definition(raw: Any, where: str = "task") -> TaskDefinition:
    _expect(isinstance(raw, dict), f"{where} must be a mapping")
    name = raw.get("name")
    _expect(_is_non_empty_str(name), f"{where}.name is required")
    entry = raw.get("entry")
    _expect(_is_non_empty_str(entry), f"{where}.entry is required")
    return TaskDefinition(
        name=name,
        entry=entry,
        option=_key_list(raw.get("option"), f"{where}.option"),
        pipeline_override=_override(raw, where),
        label=_optional_str(raw, "label", where),
    )


def _parse_named_list(raw: Any, where: str) -> List[Dict[str, Any]]:
    if raw is None:
        return []
    _expect(isinstance(raw, list), f"{where} must be a list")
    seen: set = set()
    for i, item in enumerate(raw):
        _expect(isinstance(item, dict), f"{where}[{i}] must be a mapping")
        name = item.get("name")
        _expect(_is_non_empty_str(name), f"{where}[{i}].name is required")
        _expect(name not in seen, f"duplicate {where} name: {name}")
        seen.add(name)
    return raw


def _parse_resource(raw: Dict[str, Any], where: str) -> ResourceDefinition:
    path = raw.get("path")
    if path is None:
        paths: Tuple[str, ...] = ()
    elif isinstance(path, str):
        paths = (path,)
    else:
        _expect(
            isinstance(path, list) and all(isinstance(p, str) for p in path),
            f"{where}.path must be a string or a list of strings",
        )
        paths = tuple(path)
    return ResourceDefinition(
        name=raw["name"],
        path=paths,
        option=_key_list(raw.get("option"), f"{where}.option"),
        label=_optional_str(raw, "label", where),
    )


def _parse_controller(raw: Dict[str, Any], where: str) -> ControllerDefinition:
    return ControllerDefinition(
        name=raw["name"],
        type=_optional_str(raw, "type", where),
        option=_key_list(raw.get("option"), f"{where}.option"),
        label=_optional_str(raw, "label", where),
    )


def validate_project_interface(data: Any) -> ProjectInterface:
    """Valida e materializa a interface do projeto.

    Chaves de opção referenciadas por tarefas/cases e ausentes no catálogo
    não são erro: o compilador simplesmente ignora a contribuição.
    """
    _expect(isinstance(data, dict), "Project interface must be a mapping/dict")

    catalog = parse_option_catalog(data.get("option"))

    tasks = _parse_named_list(data.get("task"), "task")
    resources = _parse_named_list(data.get("resource"), "resource")
    controllers = _parse_named_list(data.get("controller"), "controller")

    return ProjectInterface(
        option=catalog,
        task=tuple(parse_task_definition(t, f"task[{i}]") for i, t in enumerate(tasks)),
        resource=tuple(_parse_resource(r, f"resource[{i}]") for i, r in enumerate(resources)),
        controller=tuple(_parse_controller(c, f"controller[{i}]") for i, c in enumerate(controllers)),
        global_option=_key_list(data.get("global_option"), "global_option"),
    )


# -----------------------------
# Valores de opção (formato persistido)
# -----------------------------

def option_value_from_dict(raw: Any) -> OptionValue:
    """Converte o formato persistido de um valor de opção na dataclass correspondente."""
    _expect(isinstance(raw, dict), "option value must be a mapping")
    vtype = raw.get("type")

    if vtype == OptionKind.SELECT.value:
        case_name = raw.get("caseName", "")
        _expect(isinstance(case_name, str), "select value caseName must be a string")
        return SelectValue(case_name=case_name)

    if vtype == OptionKind.SWITCH.value:
        value = raw.get("value", False)
        _expect(isinstance(value, bool), "switch value must be boolean")
        return SwitchValue(value=value)

    if vtype == OptionKind.CHECKBOX.value:
        names = raw.get("caseNames") or []
        _expect(
            isinstance(names, list) and all(isinstance(n, str) for n in names),
            "checkbox value caseNames must be a list of strings",
        )
        return CheckboxValue(case_names=tuple(names))

    if vtype == OptionKind.INPUT.value:
        values = raw.get("values") or {}
        _expect(isinstance(values, dict), "input value values must be a mapping")
        return InputValue(values={str(k): _text(v) for k, v in values.items()})

    raise InterfaceValidationError(f"unknown option value type: {vtype!r}")


def option_value_to_dict(value: OptionValue) -> Dict[str, Any]:
    """Converte uma dataclass de valor para o formato persistido."""
    if isinstance(value, SelectValue):
        return {"type": value.kind.value, "caseName": value.case_name}
    if isinstance(value, SwitchValue):
        return {"type": value.kind.value, "value": value.value}
    if isinstance(value, CheckboxValue):
        return {"type": value.kind.value, "caseNames": list(value.case_names)}
    if isinstance(value, InputValue):
        return {"type": value.kind.value, "values": dict(value.values)}
    raise TypeError(f"unsupported option value: {type(value).__name__}")


def selected_task_from_dict(raw: Any) -> SelectedTask:
    """Materializa uma `SelectedTask` a partir do formato persistido.

    Formato: {"taskName": "...", "optionValues": {"chave": {...}}}
    """
    _expect(isinstance(raw, dict), "selected task must be a mapping")
    task_name = raw.get("taskName")
    _expect(_is_non_empty_str(task_name), "selected task taskName is required")
    values = raw.get("optionValues") or {}
    _expect(isinstance(values, Mapping), "selected task optionValues must be a mapping")
    return SelectedTask(
        task_name=task_name,
        option_values={key: option_value_from_dict(v) for key, v in values.items()},
    )
