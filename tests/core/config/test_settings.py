# tests/core/config/test_settings.py
"""
Testes da materialização de `CompilerSettings` (settings_from_config).

Os testes asseguram que:
- chaves ausentes assumem os valores padrão
- valores inválidos levantam `InvalidSettingsError`
- o padrão de nomes reservados usa semântica de `re.search`
"""

import dataclasses

import pytest

from override_compiler.core.config.errors import InvalidSettingsError
from override_compiler.core.config.settings import CompilerSettings, settings_from_config


def test_empty_config_yields_defaults():
    assert settings_from_config({}) == CompilerSettings()


def test_settings_are_immutable():
    settings = CompilerSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.ensure_ascii = True  # type: ignore[misc]


def test_aliases_keep_declared_order():
    settings = settings_from_config({"options": {"switch_false_aliases": ["Off", "No"]}})
    assert settings.switch_false_aliases == ("Off", "No")
    assert settings.switch_true_aliases == CompilerSettings().switch_true_aliases


@pytest.mark.parametrize(
    "config",
    [
        {"compiler": {"builtin_task_pattern": "("}},
        {"compiler": {"builtin_task_pattern": ""}},
        {"compiler": {"ensure_ascii": "yes"}},
        {"options": {"switch_true_aliases": []}},
        {"options": {"switch_true_aliases": ["Yes", 1]}},
        {"templates": {"int_fallback": "  "}},
        {"compiler": ["not", "a", "mapping"]},
    ],
)
def test_invalid_values_raise(config):
    with pytest.raises(InvalidSettingsError):
        settings_from_config(config)


def test_reserved_task_name_pattern():
    settings = CompilerSettings()
    assert settings.is_reserved_task_name("__MXU_SLEEP__")
    assert not settings.is_reserved_task_name("Daily")
    assert not settings.is_reserved_task_name("__lower__")

    custom = settings_from_config({"compiler": {"builtin_task_pattern": "^sys:"}})
    assert custom.is_reserved_task_name("sys:reboot")
