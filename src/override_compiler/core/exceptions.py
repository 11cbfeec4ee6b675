"""
Override Compiler — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do compilador.

Objetivo:
- Permitir que unidades internas (ex.: substituição de templates) sinalizem
  falhas semânticas tipadas
- Facilitar o mapeamento determinístico para DiagnosticPayload
- Evitar ValueError/RuntimeError genéricos nos pontos de recuperação

Regras:
- Exceções deste módulo nunca atravessam `compile_task`.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CompilerException(Exception):
    """Base class para exceções internas do compilador.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Templates de input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateSubstitutionError(CompilerException):
    """Template de input não produz um fragmento JSON válido após a substituição."""
