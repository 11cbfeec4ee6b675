"""Motor de opções: defaults, resolução de cases, templates, coleta e merge."""

from .cases import CaseResolution, resolve_case  # noqa: F401
from .collector import collect_option_overrides  # noqa: F401
from .defaults import (  # noqa: F401
    default_option_value,
    effective_value,
    initialize_option_values,
    set_option_value,
)
from .merge import merge_fragments  # noqa: F401
from .template import (  # noqa: F401
    effective_raw_value,
    find_invalid_inputs,
    render_template,
    substitute,
)
