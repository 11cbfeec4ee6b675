"""Hashing canônico do documento de interface.

O hash da interface serve para:
- associar um documento compilado à versão da interface que o produziu
- detectar divergência entre execuções

Decisão: o hash é calculado a partir de JSON canônico (sort_keys, separators).
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict


def compute_interface_hash(document: Dict[str, Any]) -> str:
    """Computa SHA-256 do documento de interface em formato canônico."""
    if not isinstance(document, dict):
        raise TypeError(
            f"Interface para hashing deve ser dict, recebido: {type(document).__name__}"
        )
    canonical = json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
