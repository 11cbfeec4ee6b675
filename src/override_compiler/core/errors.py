"""
Override Compiler — Canonical Diagnostic Structures (v1)

Este módulo define o padrão canônico de diagnósticos do compilador de
overrides. Nenhum diagnóstico interrompe a compilação: todos descrevem
uma contribuição que foi ignorada ou resolvida por fallback, e são
registrados no `CompileContext` da chamada.

Diagnósticos devem ser:

- explícitos
- serializáveis
- acionáveis

O documento compilado nunca carrega diagnósticos; eles vivem apenas no
relatório de compilação.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiagnosticPayload:
    """
    Payload canônico de diagnóstico do compilador.

    Campos:
    - type: código estável do diagnóstico (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do projeto (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do diagnóstico."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de diagnóstico (v1)
# ---------------------------------------------------------------------------

# Definições ausentes
MISSING_DEFINITION = "MISSING_DEFINITION"
NO_PROJECT_OR_TASK = "NO_PROJECT_OR_TASK"

# Resolução de cases
CASE_RESOLUTION_FALLBACK = "CASE_RESOLUTION_FALLBACK"

# Templates de input
TEMPLATE_PARSE_FAILURE = "TEMPLATE_PARSE_FAILURE"
INPUT_VERIFY_FAILED = "INPUT_VERIFY_FAILED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_definition(
    *,
    kind: str,
    name: str,
    scope: Optional[str] = None,
    hint: str = "Declare a definição referenciada no arquivo de interface ou remova a referência.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=MISSING_DEFINITION,
        message=f"Definição de {kind} não encontrada: {name}",
        details={
            "kind": kind,
            "name": name,
            "scope": scope,
        },
        hint=hint,
    )


def no_project_or_task(
    *,
    task_name: str,
    project_loaded: bool,
    hint: str = "Carregue a interface do projeto e confirme que a tarefa está declarada em `task`.",
) -> DiagnosticPayload:
    message = (
        "Tarefa não declarada na interface do projeto"
        if project_loaded
        else "Interface do projeto ausente"
    )
    return DiagnosticPayload(
        type=NO_PROJECT_OR_TASK,
        message=message,
        details={
            "task_name": task_name,
            "project_loaded": project_loaded,
        },
        hint=hint,
    )


def case_resolution_fallback(
    *,
    option_key: str,
    requested: str,
    resolved: Optional[str],
    hint: str = "Atualize o valor salvo da opção ou declare o case correspondente.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=CASE_RESOLUTION_FALLBACK,
        message=f"Case '{requested}' não existe na opção '{option_key}'",
        details={
            "option_key": option_key,
            "requested": requested,
            "resolved": resolved,
        },
        hint=hint,
    )


def template_parse_failure(
    *,
    option_key: str,
    reason: str,
    fields: Optional[List[str]] = None,
    hint: str = "Revise o template de pipeline_override e o pipeline_type declarado para cada input.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=TEMPLATE_PARSE_FAILURE,
        message=f"Falha ao materializar o template da opção '{option_key}'",
        details={
            "option_key": option_key,
            "reason": reason,
            "fields": list(fields or []),
        },
        hint=hint,
    )


def input_verify_failed(
    *,
    option_key: str,
    field: str,
    pattern: str,
    value: str,
    hint: str = "Corrija o valor informado no campo ou ajuste o padrão `verify` declarado.",
) -> DiagnosticPayload:
    return DiagnosticPayload(
        type=INPUT_VERIFY_FAILED,
        message=f"Valor do campo '{field}' não atende ao padrão declarado",
        details={
            "option_key": option_key,
            "field": field,
            "pattern": pattern,
            "value": value,
        },
        hint=hint,
    )
