# src/override_compiler/core/context.py
"""
CompileContext — Contexto canônico de uma chamada de compilação.

Este módulo define o **CompileContext**, a estrutura criada por cada chamada
de `compile_task_with_report` e repassada às unidades do motor de opções.

O CompileContext é o **único meio permitido** de:
- registro de eventos estruturados da compilação
- coleta de warnings não fatais, agrupados por escopo (chave de opção ou tarefa)
- acúmulo dos diagnósticos canônicos (`DiagnosticPayload`)

Princípios fundamentais:
- Isolamento por chamada (cada compilação possui seu próprio contexto)
- Nenhuma unidade do motor acessa estado global para reportar problemas
- O documento compilado nunca depende do conteúdo do contexto
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from .errors import DiagnosticPayload


@dataclass
class CompileContext:
    """
    Contexto de diagnóstico de uma compilação.

    Campos canônicos:
    - compile_id: identificador único da chamada
    - created_at: timestamp UTC de criação do contexto
    - task_name: tarefa sendo compilada
    - events: log estruturado de eventos
    - warnings: warnings por escopo
    - diagnostics: diagnósticos canônicos, na ordem em que ocorreram
    """

    compile_id: str
    created_at: datetime
    task_name: str

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)
    diagnostics: List[DiagnosticPayload] = field(default_factory=list)

    @classmethod
    def new(cls, *, task_name: str) -> "CompileContext":
        return cls(
            compile_id=str(uuid4()),
            created_at=datetime.now(timezone.utc),
            task_name=task_name,
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, scope: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "compile_id": self.compile_id,
            "task_name": self.task_name,
            "scope": scope,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, scope: str, message: str) -> None:
        if scope not in self.warnings:
            self.warnings[scope] = []
        self.warnings[scope].append(message)

    # -----------------------------
    # Diagnósticos canônicos
    # -----------------------------
    def add_diagnostic(self, *, scope: str, payload: DiagnosticPayload) -> None:
        """Registra um diagnóstico como evento `warning` e como warning do escopo."""
        self.diagnostics.append(payload)
        self.log(
            scope=scope,
            level="warning",
            message=payload.message,
            type=payload.type,
            details=dict(payload.details),
        )
        self.add_warning(scope=scope, message=payload.message)

    def has_diagnostic(self, diagnostic_type: str) -> bool:
        return any(d.type == diagnostic_type for d in self.diagnostics)
