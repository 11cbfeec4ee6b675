# tests/core/compiler/test_builtin_registry.py
"""Testes do registro de tarefas embutidas (builtin_tasks.yaml)."""

import pytest

from override_compiler.core.config.settings import CompilerSettings
from override_compiler.core.interface.errors import InterfaceValidationError
from override_compiler.core.interface.types import InputOption, PipelineType, SwitchOption
from override_compiler.core.compiler.builtin import (
    _parse_registry,
    find_builtin_option,
    get_builtin_task,
    is_builtin_task,
    list_builtin_tasks,
)


EXPECTED_TASKS = [
    "__MXU_SLEEP__",
    "__MXU_WAITUNTIL__",
    "__MXU_NOTIFY__",
    "__MXU_LAUNCH__",
    "__MXU_KILLPROC__",
    "__MXU_POWER__",
    "__MXU_WEBHOOK__",
]


def test_registry_lists_all_tasks_in_order():
    assert [b.task_name for b in list_builtin_tasks()] == EXPECTED_TASKS


def test_every_builtin_is_well_formed():
    """
    Cada tarefa embutida:
        - tem nome reservado
        - sobrescreve o próprio entry com uma ação Custom
        - declara apenas opções presentes no seu catálogo privado
    """
    settings = CompilerSettings()
    for builtin in list_builtin_tasks():
        assert settings.is_reserved_task_name(builtin.task_name)
        override = builtin.task.pipeline_override[builtin.entry]
        assert override["action"] == "Custom"
        assert override["custom_action"] == f"{builtin.entry}_ACTION"
        for key in builtin.task.option:
            assert key in builtin.options


def test_sleep_option_definition():
    sleep = get_builtin_task("__MXU_SLEEP__")
    assert sleep.entry == "MXU_SLEEP"
    assert sleep.icon == "Timer"

    option = sleep.options["__MXU_SLEEP_OPTION__"]
    assert isinstance(option, InputOption)
    (field,) = option.inputs
    assert field.name == "sleep_time"
    assert field.default == "5"
    assert field.pipeline_type is PipelineType.INT
    assert field.verify == r"^[1-9]\d*$"


def test_yes_no_case_names_stay_strings():
    wait = find_builtin_option("__MXU_LAUNCH_WAIT_OPTION__")
    assert isinstance(wait, SwitchOption)
    assert wait.case_names() == ("Yes", "No")
    assert wait.default_case == "No"


def test_lookup_helpers():
    assert is_builtin_task("__MXU_POWER__")
    assert not is_builtin_task("__MXU_UNKNOWN__")
    assert get_builtin_task("Daily") is None
    assert find_builtin_option("__MXU_KILLPROC_NAME_OPTION__") is not None
    assert find_builtin_option("Nope") is None


@pytest.mark.parametrize(
    "data",
    [
        None,
        {"tasks": "x"},
        {"tasks": ["x"]},
        {"tasks": [{"task": {"name": "__A__"}}]},
        {
            "tasks": [
                {"task": {"name": "__A__", "entry": "A"}},
                {"task": {"name": "__A__", "entry": "B"}},
            ]
        },
    ],
)
def test_invalid_registry_data(data):
    with pytest.raises(InterfaceValidationError):
        _parse_registry(data)
