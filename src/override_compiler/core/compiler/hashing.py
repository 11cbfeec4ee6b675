"""Hash canônico do documento compilado (rastreabilidade)."""

from __future__ import annotations

import hashlib
import json


def compute_override_hash(document: str) -> str:
    """SHA-256 do documento compilado re-serializado em forma canônica.

    A forma canônica ordena chaves, então dois documentos que diferem apenas
    na ordem das chaves de um objeto produzem o mesmo hash. A ordem dos
    fragmentos no array é preservada.
    """
    parsed = json.loads(document)
    canonical = json.dumps(parsed, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
