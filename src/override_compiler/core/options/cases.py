# src/override_compiler/core/options/cases.py
"""
Resolução do case ativo de opções select/switch.

Regras:
    - switch: `True` procura o primeiro case cujo nome pertence aos aliases
      "ligado"; `False`, aos aliases "desligado". Sem correspondência, tenta o
      nome literal "Yes"/"No".
    - select: usa o `caseName` armazenado; se não existir entre os cases,
      recai no `default_case` e depois no primeiro case declarado.

Nenhuma regra levanta exceção: quando o valor armazenado não corresponde a um
case, `CaseResolution.fell_back` sinaliza a degradação para o chamador.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from ..config.settings import CompilerSettings
from ..interface.types import (
    Case,
    OptionKind,
    OptionValue,
    SelectOption,
    SelectValue,
    SwitchOption,
    SwitchValue,
)


@dataclass(frozen=True)
class CaseResolution:
    """Resultado da resolução: case encontrado (ou None) e o nome pedido."""
    case: Optional[Case]
    requested: str
    fell_back: bool = False


def switch_case_name(aliases: Tuple[str, ...], cases: Tuple[Case, ...]) -> Optional[str]:
    alias_set = set(aliases)
    for case in cases:
        if case.name in alias_set:
            return case.name
    return None


def _resolve_switch(
    definition: SwitchOption, value: SwitchValue, settings: CompilerSettings
) -> CaseResolution:
    aliases = settings.switch_true_aliases if value.value else settings.switch_false_aliases
    name = switch_case_name(aliases, definition.cases)
    if name is None:
        literal = "Yes" if value.value else "No"
        case = definition.find_case(literal)
        return CaseResolution(case=case, requested=literal, fell_back=case is None)
    return CaseResolution(case=definition.find_case(name), requested=name)


def _resolve_select(
    definition: SelectOption, value: SelectValue, settings: CompilerSettings
) -> CaseResolution:
    case = definition.find_case(value.case_name)
    if case is not None:
        return CaseResolution(case=case, requested=value.case_name)

    fallback = definition.find_case(definition.default_case)
    if fallback is None and definition.cases:
        fallback = definition.cases[0]
    return CaseResolution(case=fallback, requested=value.case_name, fell_back=True)


_Resolver = Callable[..., CaseResolution]

_RESOLVERS: Dict[OptionKind, _Resolver] = {
    OptionKind.SWITCH: _resolve_switch,
    OptionKind.SELECT: _resolve_select,
}


def resolve_case(
    definition: Union[SelectOption, SwitchOption],
    value: OptionValue,
    settings: CompilerSettings,
) -> CaseResolution:
    """Resolve o case ativo de uma opção select/switch.

    `value` deve ter o mesmo `kind` da definição (ver `defaults.effective_value`).
    """
    if value.kind is not definition.kind:
        raise TypeError(
            f"option value kind {value.kind.value!r} does not match definition kind {definition.kind.value!r}"
        )
    resolver = _RESOLVERS.get(definition.kind)
    if resolver is None:
        raise TypeError(f"case resolution is not defined for {definition.kind.value!r} options")
    return resolver(definition, value, settings)
