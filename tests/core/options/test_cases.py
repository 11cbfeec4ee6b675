# tests/core/options/test_cases.py
"""Testes da resolução do case ativo de opções select/switch."""

import pytest

from override_compiler.core.config.settings import CompilerSettings
from override_compiler.core.interface.schema import parse_option_definition
from override_compiler.core.interface.types import CheckboxValue, SelectValue, SwitchValue
from override_compiler.core.options.cases import resolve_case


def _switch(*names):
    return parse_option_definition("S", {"type": "switch", "cases": [{"name": n} for n in names]})


@pytest.mark.parametrize(
    "names,value,expected",
    [
        (("Y", "N"), True, "Y"),
        (("Y", "N"), False, "N"),
        (("yes", "no"), True, "yes"),
        (("n", "y"), True, "y"),
        (("Yes", "No"), False, "No"),
    ],
)
def test_switch_alias_mapping(names, value, expected, compiler_settings):
    resolution = resolve_case(_switch(*names), SwitchValue(value), compiler_settings)
    assert resolution.case.name == expected
    assert resolution.fell_back is False


def test_switch_without_alias_case_falls_back_to_literal(compiler_settings):
    resolution = resolve_case(_switch("On", "Off"), SwitchValue(True), compiler_settings)
    assert resolution.case is None
    assert resolution.requested == "Yes"
    assert resolution.fell_back is True


def test_switch_uses_configured_aliases():
    settings = CompilerSettings(switch_true_aliases=("On",), switch_false_aliases=("Off",))
    resolution = resolve_case(_switch("On", "Off"), SwitchValue(False), settings)
    assert resolution.case.name == "Off"


def test_switch_picks_first_declared_alias_case(compiler_settings):
    resolution = resolve_case(_switch("y", "Yes", "No"), SwitchValue(True), compiler_settings)
    assert resolution.case.name == "y"


def test_select_direct_and_fallback(compiler_settings):
    definition = parse_option_definition(
        "Mode",
        {"default_case": "B", "cases": [{"name": "A"}, {"name": "B"}]},
    )
    assert resolve_case(definition, SelectValue("A"), compiler_settings).case.name == "A"

    fallback = resolve_case(definition, SelectValue("Removed"), compiler_settings)
    assert fallback.case.name == "B"
    assert fallback.requested == "Removed"
    assert fallback.fell_back is True


def test_select_fallback_to_first_case_without_default(compiler_settings):
    definition = parse_option_definition("Mode", {"cases": [{"name": "A"}, {"name": "B"}]})
    assert resolve_case(definition, SelectValue("Removed"), compiler_settings).case.name == "A"


def test_mismatched_value_kind_is_rejected(compiler_settings):
    with pytest.raises(TypeError):
        resolve_case(_switch("Yes", "No"), CheckboxValue(("Yes",)), compiler_settings)
