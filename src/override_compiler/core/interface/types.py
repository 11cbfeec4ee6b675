# src/override_compiler/core/interface/types.py
"""
Tipos canônicos da interface do projeto e do estado de opções.

Este módulo define as estruturas que descrevem, de forma imutável, o que o
autor do projeto declarou (catálogo de opções, tarefas, recursos,
controladores) e, de forma mutável, o que o usuário selecionou para uma
tarefa (`SelectedTask`).

Componentes principais:
    - OptionKind          → enum fechado dos tipos de opção
    - PipelineType        → enum do tipo de coerção de um campo de input
    - Case / InputField   → blocos de construção das definições
    - SelectOption, SwitchOption, CheckboxOption, InputOption
                          → variantes da união `OptionDefinition`
    - SelectValue, SwitchValue, CheckboxValue, InputValue
                          → variantes da união `OptionValue`
    - TaskDefinition, ResourceDefinition, ControllerDefinition, ProjectInterface
    - SelectedTask        → instância de tarefa com o mapa esparso de valores

Invariantes:
    - Cada variante expõe `kind`, e o `kind` de um valor espelha o `kind`
      da definição correspondente
    - A ordem dos cases e dos inputs é a ordem declarada no arquivo
    - Definições são imutáveis; apenas `SelectedTask.option_values` é mutável,
      e somente pela camada de estado (nunca pelo compilador)

Limites explícitos:
    - Não valida estrutura (ver `schema`)
    - Não resolve defaults nem cases (ver `options`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


class OptionKind(str, Enum):
    """
    Tipos de opção suportados pelo catálogo.

    Os valores são strings para facilitar serialização e leitura direta
    do campo `type` no arquivo de interface.

    Tipos definidos:
        - SELECT: escolha única entre cases (padrão quando `type` é omitido)
        - SWITCH: liga/desliga mapeado para cases por aliases
        - CHECKBOX: seleção múltipla de cases
        - INPUT: campos de texto substituídos em um template
    """
    SELECT = "select"
    SWITCH = "switch"
    CHECKBOX = "checkbox"
    INPUT = "input"


class PipelineType(str, Enum):
    """Tipo de coerção aplicado a um campo de input no template."""
    STRING = "string"
    INT = "int"
    BOOL = "bool"


# =============================================================================
# Definições (catálogo de opções)
# =============================================================================


@dataclass(frozen=True)
class Case:
    """Variante nomeada de uma opção select/switch/checkbox.

    `option` lista as chaves de opções filhas desbloqueadas quando o case
    está ativo.
    """
    name: str
    pipeline_override: Optional[Dict[str, Any]] = None
    option: Tuple[str, ...] = ()
    label: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class InputField:
    """Campo de uma opção input."""
    name: str
    default: str = ""
    pipeline_type: PipelineType = PipelineType.STRING
    verify: Optional[str] = None
    pattern_msg: Optional[str] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class _CasedOption:
    cases: Tuple[Case, ...] = ()
    label: Optional[str] = None
    description: Optional[str] = None

    def find_case(self, name: Optional[str]) -> Optional[Case]:
        if name is None:
            return None
        for case in self.cases:
            if case.name == name:
                return case
        return None

    def case_names(self) -> Tuple[str, ...]:
        return tuple(case.name for case in self.cases)


@dataclass(frozen=True)
class SelectOption(_CasedOption):
    kind: ClassVar[OptionKind] = OptionKind.SELECT
    default_case: Optional[str] = None


@dataclass(frozen=True)
class SwitchOption(_CasedOption):
    kind: ClassVar[OptionKind] = OptionKind.SWITCH
    default_case: Optional[str] = None


@dataclass(frozen=True)
class CheckboxOption(_CasedOption):
    kind: ClassVar[OptionKind] = OptionKind.CHECKBOX


@dataclass(frozen=True)
class InputOption:
    kind: ClassVar[OptionKind] = OptionKind.INPUT
    inputs: Tuple[InputField, ...] = ()
    pipeline_override: Optional[Dict[str, Any]] = None
    label: Optional[str] = None
    description: Optional[str] = None


OptionDefinition = Union[SelectOption, SwitchOption, CheckboxOption, InputOption]


# =============================================================================
# Valores (estado selecionado pelo usuário)
# =============================================================================


@dataclass(frozen=True)
class SelectValue:
    kind: ClassVar[OptionKind] = OptionKind.SELECT
    case_name: str


@dataclass(frozen=True)
class SwitchValue:
    kind: ClassVar[OptionKind] = OptionKind.SWITCH
    value: bool


@dataclass(frozen=True)
class CheckboxValue:
    """Cases marcados, na ordem em que foram clicados.

    A ordem de clique não afeta a compilação: fragmentos seguem a ordem
    declarada dos cases.
    """
    kind: ClassVar[OptionKind] = OptionKind.CHECKBOX
    case_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InputValue:
    kind: ClassVar[OptionKind] = OptionKind.INPUT
    values: Dict[str, str] = field(default_factory=dict)


OptionValue = Union[SelectValue, SwitchValue, CheckboxValue, InputValue]


# =============================================================================
# Tarefas, recursos, controladores
# =============================================================================


@dataclass(frozen=True)
class TaskDefinition:
    name: str
    entry: str
    option: Tuple[str, ...] = ()
    pipeline_override: Optional[Dict[str, Any]] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    path: Tuple[str, ...] = ()
    option: Tuple[str, ...] = ()
    label: Optional[str] = None


@dataclass(frozen=True)
class ControllerDefinition:
    name: str
    type: Optional[str] = None
    option: Tuple[str, ...] = ()
    label: Optional[str] = None


@dataclass(frozen=True)
class ProjectInterface:
    """
    Definição completa do projeto, carregada uma única vez.

    Escopos de opções (precedência crescente):
        - global_option
        - resource.option
        - controller.option
        - task.option
    """
    option: Dict[str, OptionDefinition] = field(default_factory=dict)
    task: Tuple[TaskDefinition, ...] = ()
    resource: Tuple[ResourceDefinition, ...] = ()
    controller: Tuple[ControllerDefinition, ...] = ()
    global_option: Tuple[str, ...] = ()

    def find_task(self, name: str) -> Optional[TaskDefinition]:
        return next((t for t in self.task if t.name == name), None)

    def find_resource(self, name: str) -> Optional[ResourceDefinition]:
        return next((r for r in self.resource if r.name == name), None)

    def find_controller(self, name: str) -> Optional[ControllerDefinition]:
        return next((c for c in self.controller if c.name == name), None)


@dataclass
class SelectedTask:
    """
    Instância de uma tarefa escolhida pelo usuário.

    `option_values` é um mapa esparso: uma chave ausente significa "use o
    default da definição". O mapa cresce conforme cases são explorados e
    pertence à camada de estado; o compilador apenas o lê.
    """
    task_name: str
    option_values: Dict[str, OptionValue] = field(default_factory=dict)
