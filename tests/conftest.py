# tests/conftest.py
"""
Fixtures compartilhados para testes do Override Compiler.

Este módulo define fixtures reutilizáveis que fornecem:
- uma interface de projeto reduzida, cobrindo os quatro tipos de opção
  e os quatro escopos de precedência
- configuração do compilador em YAML (defaults + override local)
- settings padrão do compilador
- uma fábrica de `SelectedTask`

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados (nova cópia por teste)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture compila overrides

Limites explícitos:
    - Não substituir testes de integração
    - Não validar semântica completa da interface
"""

import copy

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão semelhante ao `config.defaults.yaml` empacotado.

    Configuração fornecida como string para evitar I/O; os testes decidem
    quando escrevê-la em `tmp_path`.
    """

    return """\
compiler:
  builtin_task_pattern: "^__[A-Z0-9_]+__$"
  ensure_ascii: false
options:
  switch_true_aliases: ["Yes", "yes", "Y", "y"]
  switch_false_aliases: ["No", "no", "N", "n"]
templates:
  int_fallback: "0"
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: altera apenas o que difere dos defaults."""

    return """\
compiler:
  ensure_ascii: true
options:
  switch_true_aliases: ["On", "Yes"]
"""


@pytest.fixture
def compiler_settings():
    from override_compiler.core.config.settings import CompilerSettings

    return CompilerSettings()


# =====================================================
# Interface fixtures
# =====================================================

_PROJECT_INTERFACE = {
    "option": {
        "GlobalSpeed": {
            "type": "select",
            "default_case": "fast",
            "cases": [
                {"name": "fast", "pipeline_override": {"Main": {"speed": "fast"}}},
                {"name": "slow", "pipeline_override": {"Main": {"speed": "slow"}}},
            ],
        },
        "ResourceRegion": {
            "cases": [
                {"name": "cn", "pipeline_override": {"Main": {"region": "cn"}}},
                {"name": "en", "pipeline_override": {"Main": {"region": "en"}}},
            ],
        },
        "ControllerInput": {
            "type": "switch",
            "cases": [
                {"name": "Yes", "pipeline_override": {"Main": {"input": "touch"}}},
                {"name": "No", "pipeline_override": {"Main": {"input": "adb"}}},
            ],
        },
        "Difficulty": {
            "type": "select",
            "cases": [
                {
                    "name": "Easy",
                    "pipeline_override": {"Main": {"difficulty": 1}},
                    "option": ["EasyRepeat"],
                },
                {"name": "Hard", "pipeline_override": {"Main": {"difficulty": 3}}},
            ],
        },
        "EasyRepeat": {
            "type": "input",
            "inputs": [
                {"name": "repeat", "default": "1", "pipeline_type": "int", "verify": "^[1-9]\\d*$"},
            ],
            "pipeline_override": {"Main": {"repeat": "{repeat}"}},
        },
        "Rewards": {
            "type": "checkbox",
            "cases": [
                {"name": "A", "pipeline_override": {"Reward": {"next": ["A"]}}},
                {"name": "B", "pipeline_override": {"Reward": {"next": ["B"]}}},
                {"name": "C", "pipeline_override": {"Reward": {"next": ["C"]}}},
            ],
        },
    },
    "task": [
        {
            "name": "Daily",
            "entry": "DailyEntry",
            "option": ["Difficulty", "Rewards"],
            "pipeline_override": {"DailyEntry": {"enabled": True}},
        },
        {"name": "Plain", "entry": "PlainEntry"},
    ],
    "resource": [
        {"name": "Official", "path": ["./resource"], "option": ["ResourceRegion"]},
    ],
    "controller": [
        {"name": "Adb", "type": "Adb", "option": ["ControllerInput"]},
    ],
    "global_option": ["GlobalSpeed"],
}


@pytest.fixture
def project_like_interface_dict() -> dict:
    """
    Interface de projeto reduzida, no formato do arquivo de interface.

    Cobre:
        - select com default_case (GlobalSpeed) e sem `type` (ResourceRegion)
        - switch Yes/No (ControllerInput)
        - select cujo case "Easy" desbloqueia um input int (Difficulty -> EasyRepeat)
        - checkbox com três cases (Rewards)
        - os quatro escopos: global, resource, controller e task

    Returns:
        dict: nova cópia a cada teste.
    """
    return copy.deepcopy(_PROJECT_INTERFACE)


@pytest.fixture
def project_interface(project_like_interface_dict):
    from override_compiler.core.interface.schema import validate_project_interface

    return validate_project_interface(project_like_interface_dict)


@pytest.fixture
def make_selected_task():
    """Fábrica de `SelectedTask` a partir do formato persistido dos valores."""
    from override_compiler.core.interface.schema import selected_task_from_dict

    def _make(task_name: str, option_values=None):
        return selected_task_from_dict({"taskName": task_name, "optionValues": option_values or {}})

    return _make
