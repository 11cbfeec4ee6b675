# src/override_compiler/core/options/merge.py
"""
Deep Merge Unit (fragmentos de pipeline_override).

Diferente do `config.merge.deep_merge`, este merge é permissivo: nunca falha
por conflito de tipo. Objetos são mesclados recursivamente; qualquer outro
valor (lista, escalar, null) do fragmento posterior substitui o anterior.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Mapping


def _merge_into(acc: Dict[str, Any], fragment: Mapping[str, Any]) -> None:
    for key, value in fragment.items():
        current = acc.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            acc[key] = copy.deepcopy(value)


def merge_fragments(fragments: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """Funde os fragmentos em ordem (fold-left) em um único objeto novo.

    Nenhum fragmento de entrada é mutado.
    """
    result: Dict[str, Any] = {}
    for fragment in fragments:
        _merge_into(result, fragment)
    return result
