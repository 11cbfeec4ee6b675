"""Override Compiler — Interface (core).

Componentes canônicos da **interface do projeto**:
 - tipos imutáveis (catálogo de opções, tarefas, recursos, controladores)
 - parsing (JSON/YAML)
 - validação estrutural
 - conversão do formato persistido dos valores de opção
 - hashing canônico (rastreabilidade)
"""

from .errors import (  # noqa: F401
    InterfaceError,
    InterfacePathMissingError,
    InterfaceFileNotFoundError,
    InterfaceParseError,
    UnsupportedInterfaceFormatError,
    InterfaceValidationError,
)

from .hashing import compute_interface_hash  # noqa: F401
from .loader import load_interface_document, load_project_interface  # noqa: F401
from .schema import (  # noqa: F401
    option_value_from_dict,
    option_value_to_dict,
    parse_option_catalog,
    parse_option_definition,
    parse_task_definition,
    selected_task_from_dict,
    validate_project_interface,
)
from .types import (  # noqa: F401
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
