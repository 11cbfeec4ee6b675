# src/override_compiler/core/config/settings.py
"""
Settings materializados do compilador.

Este módulo converte a configuração resolvida (dict puro, após deep-merge)
em `CompilerSettings`, a estrutura imutável recebida explicitamente pelo
compilador e pelas unidades do motor de opções.

Invariantes:
    - `CompilerSettings` é imutável
    - Aliases de switch preservam a ordem declarada
    - `builtin_task_pattern` é sempre uma regex compilável
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import InvalidSettingsError


@dataclass(frozen=True)
class CompilerSettings:
    """Parâmetros explícitos do compilador (sem estado global)."""

    builtin_task_pattern: str = r"^__[A-Z0-9_]+__$"
    ensure_ascii: bool = False
    switch_true_aliases: Tuple[str, ...] = ("Yes", "yes", "Y", "y")
    switch_false_aliases: Tuple[str, ...] = ("No", "no", "N", "n")
    int_fallback: str = "0"

    def is_reserved_task_name(self, task_name: str) -> bool:
        return re.search(self.builtin_task_pattern, task_name) is not None


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidSettingsError(f"config.{name} must be a mapping")
    return section


def _aliases(raw: Any, path: str) -> Tuple[str, ...]:
    if not isinstance(raw, list) or not raw:
        raise InvalidSettingsError(f"{path} must be a non-empty list")
    if not all(isinstance(item, str) and item for item in raw):
        raise InvalidSettingsError(f"{path} items must be non-empty strings")
    return tuple(raw)


def settings_from_config(config: Dict[str, Any]) -> CompilerSettings:
    """Valida e materializa `CompilerSettings` a partir da configuração resolvida.

    Chaves ausentes assumem os valores padrão da dataclass.

    Raises:
        InvalidSettingsError: se algum valor não puder ser materializado.
    """
    if not isinstance(config, dict):
        raise InvalidSettingsError("config root must be a mapping")

    defaults = CompilerSettings()
    compiler = _section(config, "compiler")
    options = _section(config, "options")
    templates = _section(config, "templates")

    pattern = compiler.get("builtin_task_pattern", defaults.builtin_task_pattern)
    if not isinstance(pattern, str) or not pattern:
        raise InvalidSettingsError("compiler.builtin_task_pattern must be a non-empty string")
    try:
        re.compile(pattern)
    except re.error as e:
        raise InvalidSettingsError(f"compiler.builtin_task_pattern is not a valid regex: {e}") from e

    ensure_ascii = compiler.get("ensure_ascii", defaults.ensure_ascii)
    if not isinstance(ensure_ascii, bool):
        raise InvalidSettingsError("compiler.ensure_ascii must be boolean")

    true_aliases = defaults.switch_true_aliases
    if "switch_true_aliases" in options:
        true_aliases = _aliases(options["switch_true_aliases"], "options.switch_true_aliases")

    false_aliases = defaults.switch_false_aliases
    if "switch_false_aliases" in options:
        false_aliases = _aliases(options["switch_false_aliases"], "options.switch_false_aliases")

    int_fallback = templates.get("int_fallback", defaults.int_fallback)
    if not isinstance(int_fallback, str) or not int_fallback.strip():
        raise InvalidSettingsError("templates.int_fallback must be a non-empty string")

    return CompilerSettings(
        builtin_task_pattern=pattern,
        ensure_ascii=ensure_ascii,
        switch_true_aliases=true_aliases,
        switch_false_aliases=false_aliases,
        int_fallback=int_fallback,
    )
