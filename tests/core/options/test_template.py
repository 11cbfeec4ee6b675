# tests/core/options/test_template.py
"""
Testes do Template Substitution Unit.

Os testes asseguram que:
- placeholders ocupando uma folha inteira viram valores JSON nativos
- ocorrências parciais são substituídas como texto
- a coerção int/bool segue as regras declaradas
- o valor efetivo respeita a ordem: valor informado > default > ""
- falhas são sinalizadas (render_template) ou absorvidas (substitute)
- o template original nunca é mutado
"""

import json

import pytest

from override_compiler.core.config.settings import CompilerSettings
from override_compiler.core.exceptions import TemplateSubstitutionError
from override_compiler.core.interface.schema import parse_option_definition
from override_compiler.core.interface.types import InputField, PipelineType
from override_compiler.core.options.template import (
    effective_raw_value,
    find_invalid_inputs,
    render_template,
    substitute,
)


def _field(name, pipeline_type="string", default=""):
    return InputField(name=name, default=default, pipeline_type=PipelineType(pipeline_type))


SLEEP_TEMPLATE = {"custom_action_param": {"sleep_time": "{sleep_time}"}}


def test_int_coercion_unquotes_full_placeholder():
    out = render_template(SLEEP_TEMPLATE, [_field("sleep_time", "int")], {"sleep_time": "7"})
    assert out == {"custom_action_param": {"sleep_time": 7}}
    assert json.dumps(out, separators=(",", ":")) == '{"custom_action_param":{"sleep_time":7}}'


def test_int_empty_value_uses_fallback():
    out = render_template(SLEEP_TEMPLATE, [_field("sleep_time", "int")], {"sleep_time": ""})
    assert out == {"custom_action_param": {"sleep_time": 0}}

    settings = CompilerSettings(int_fallback="1")
    out = render_template(SLEEP_TEMPLATE, [_field("sleep_time", "int")], {}, settings=settings)
    assert out == {"custom_action_param": {"sleep_time": 1}}


def test_int_partial_occurrence_is_textual():
    template = {"Node": {"text": "wait {n}s", "n": "{n}"}}
    out = render_template(template, [_field("n", "int")], {"n": "12"})
    assert out == {"Node": {"text": "wait 12s", "n": 12}}


def test_int_accepts_negative_and_decimal_numbers():
    field = [_field("n", "int")]
    assert render_template({"v": "{n}"}, field, {"n": "-3"}) == {"v": -3}
    assert render_template({"v": "{n}"}, field, {"n": "2.5"}) == {"v": 2.5}


@pytest.mark.parametrize("raw", ["abc", "true", "NaN", "[1]", "1 2"])
def test_int_rejects_non_numeric_values(raw):
    with pytest.raises(TemplateSubstitutionError):
        render_template({"v": "{n}"}, [_field("n", "int")], {"n": raw})


@pytest.mark.parametrize("raw", ["true", "1", "Yes", "y", "TRUE"])
def test_bool_truthy_values(raw):
    assert render_template({"v": "{flag}"}, [_field("flag", "bool")], {"flag": raw}) == {"v": True}


@pytest.mark.parametrize("raw", ["false", "", "no", "2", "on"])
def test_bool_falsy_values(raw):
    assert render_template({"v": "{flag}"}, [_field("flag", "bool")], {"flag": raw}) == {"v": False}


def test_bool_partial_occurrence_is_textual():
    out = render_template({"v": "flag={flag}"}, [_field("flag", "bool")], {"flag": "y"})
    assert out == {"v": "flag=true"}


def test_string_substitution_everywhere():
    template = {"Node": {"args": ["{program}", "--name={name}"], "title": "{name}"}}
    fields = [_field("program"), _field("name")]
    out = render_template(template, fields, {"program": "C:/app.exe", "name": "ação"})
    assert out == {"Node": {"args": ["C:/app.exe", "--name=ação"], "title": "ação"}}


def test_string_value_with_quotes_stays_valid_json():
    out = render_template({"v": "{body}"}, [_field("body")], {"body": 'say "hi"'})
    assert out == {"v": 'say "hi"'}


def test_keys_are_substituted():
    template = {"{node}": {"enabled": True}}
    out = render_template(template, [_field("node")], {"node": "Main"})
    assert out == {"Main": {"enabled": True}}


def test_typed_placeholder_as_key_is_rejected():
    with pytest.raises(TemplateSubstitutionError):
        render_template({"{n}": 1}, [_field("n", "int")], {"n": "3"})


def test_fields_are_applied_in_declaration_order():
    """Um valor que contém o placeholder de um campo posterior também é substituído."""
    template = {"v": "{first}"}
    fields = [_field("first"), _field("second")]
    out = render_template(template, fields, {"first": "a-{second}", "second": "b"})
    assert out == {"v": "a-b"}


def test_effective_raw_value_precedence():
    field = _field("x", default="dflt")
    assert effective_raw_value(field, {"x": "given"}) == "given"
    assert effective_raw_value(field, {"x": ""}) == "dflt"
    assert effective_raw_value(field, {}) == "dflt"
    assert effective_raw_value(_field("y"), {}) == ""


def test_template_is_not_mutated():
    template = {"Node": {"items": ["{x}"], "x": "{x}"}}
    snapshot = json.dumps(template)
    render_template(template, [_field("x", "int")], {"x": "4"})
    assert json.dumps(template) == snapshot


def test_unknown_placeholders_are_left_untouched():
    out = render_template({"v": "{other}"}, [_field("x")], {"x": "1"})
    assert out == {"v": "{other}"}


def test_substitute_fails_closed():
    assert substitute({"v": "{n}"}, [_field("n", "int")], {"n": "oops"}) is None
    assert substitute(SLEEP_TEMPLATE, [_field("sleep_time", "int")], {"sleep_time": "3"}) == {
        "custom_action_param": {"sleep_time": 3}
    }


def test_find_invalid_inputs():
    definition = parse_option_definition(
        "Sleep",
        {
            "type": "input",
            "inputs": [
                {"name": "seconds", "default": "5", "verify": "^[1-9]\\d*$"},
                {"name": "label"},
                {"name": "broken", "verify": "("},
            ],
            "pipeline_override": {},
        },
    )
    assert find_invalid_inputs(definition, {"seconds": "10"}) == ("broken",)
    assert find_invalid_inputs(definition, {"seconds": "0"}) == ("seconds", "broken")
    assert find_invalid_inputs(definition, {}) == ("broken",)
