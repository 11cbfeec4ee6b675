# src/override_compiler/core/options/defaults.py
"""
Default Value Initializer.

Sintetiza o valor inicial de cada opção e expande, recursivamente, as opções
filhas desbloqueadas pelo case padrão.

Regras por tipo:
    - input: cada campo recebe o `default` declarado (ou "")
    - switch: case = `default_case`, senão o segundo case, senão "No";
      valor = True se o nome do case é um alias "ligado" (sem diferenciar
      maiúsculas/minúsculas)
    - select: case = `default_case`, senão o primeiro case, senão ""
    - checkbox: seleção vazia

Invariantes:
    - Entradas existentes nunca são sobrescritas
    - Uma chave é marcada como resolvida antes de recursão nos filhos,
      o que garante término mesmo em grafos com ciclos
    - Chaves sem definição no catálogo são ignoradas
    - Os mapas recebidos nunca são mutados
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from ..config.settings import CompilerSettings
from ..interface.types import (
    Case,
    CheckboxValue,
    InputValue,
    OptionDefinition,
    OptionKind,
    OptionValue,
    SelectValue,
    SwitchValue,
)
from .cases import resolve_case


def _settings(settings: Optional[CompilerSettings]) -> CompilerSettings:
    return settings if settings is not None else CompilerSettings()


def default_option_value(
    definition: OptionDefinition, *, settings: Optional[CompilerSettings] = None
) -> OptionValue:
    """Valor padrão de uma única definição de opção (sem expansão de filhos)."""
    settings = _settings(settings)
    kind = definition.kind

    if kind is OptionKind.INPUT:
        return InputValue(values={f.name: f.default or "" for f in definition.inputs})

    if kind is OptionKind.CHECKBOX:
        return CheckboxValue(case_names=())

    if kind is OptionKind.SWITCH:
        if definition.default_case:
            name = definition.default_case
        elif len(definition.cases) > 1:
            name = definition.cases[1].name
        else:
            name = "No"
        truthy = {alias.lower() for alias in settings.switch_true_aliases}
        return SwitchValue(value=name.lower() in truthy)

    if definition.default_case:
        return SelectValue(case_name=definition.default_case)
    return SelectValue(case_name=definition.cases[0].name if definition.cases else "")


def effective_value(
    definition: OptionDefinition,
    value: Optional[OptionValue],
    *,
    settings: Optional[CompilerSettings] = None,
) -> OptionValue:
    """Valor armazenado se compatível com a definição; caso contrário, o padrão."""
    if value is None or value.kind is not definition.kind:
        return default_option_value(definition, settings=settings)
    return value


def _unlocked_case(
    definition: OptionDefinition, value: OptionValue, settings: CompilerSettings
) -> Optional[Case]:
    # select: somente o case exatamente nomeado desbloqueia filhos
    if definition.kind is OptionKind.SELECT:
        return definition.find_case(value.case_name)
    return resolve_case(definition, value, settings).case


def _initialize_into(
    keys: Iterable[str],
    catalog: Mapping[str, OptionDefinition],
    result: Dict[str, OptionValue],
    settings: CompilerSettings,
) -> None:
    for key in keys:
        definition = catalog.get(key)
        if definition is None or key in result:
            continue

        value = default_option_value(definition, settings=settings)
        result[key] = value

        if definition.kind in (OptionKind.SELECT, OptionKind.SWITCH):
            case = _unlocked_case(definition, value, settings)
            if case is not None and case.option:
                _initialize_into(case.option, catalog, result, settings)


def initialize_option_values(
    keys: Iterable[str],
    catalog: Mapping[str, OptionDefinition],
    existing: Optional[Mapping[str, OptionValue]] = None,
    *,
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, OptionValue]:
    """Resolve os valores padrão de `keys` e de todas as opções aninhadas alcançáveis.

    Args:
        keys: chaves de topo, na ordem declarada.
        catalog: catálogo de opções.
        existing: valores já resolvidos (preservados como estão).

    Returns:
        Novo mapa contendo `existing` acrescido das chaves inicializadas.
    """
    result: Dict[str, OptionValue] = dict(existing or {})
    _initialize_into(keys, catalog, result, _settings(settings))
    return result


def set_option_value(
    values: Mapping[str, OptionValue],
    key: str,
    value: OptionValue,
    catalog: Mapping[str, OptionDefinition],
    *,
    settings: Optional[CompilerSettings] = None,
) -> Dict[str, OptionValue]:
    """Retorna um novo mapa com `key` = `value`, inicializando filhos recém-desbloqueados.

    Somente opções select/switch expandem filhos; chaves filhas já presentes
    são preservadas.
    """
    settings = _settings(settings)
    result: Dict[str, OptionValue] = dict(values)
    result[key] = value

    definition = catalog.get(key)
    if definition is None or definition.kind not in (OptionKind.SELECT, OptionKind.SWITCH):
        return result
    if value.kind is not definition.kind:
        return result

    case = _unlocked_case(definition, value, settings)
    if case is not None and case.option:
        _initialize_into(case.option, catalog, result, settings)
    return result
