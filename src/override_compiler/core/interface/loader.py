"""Loader canônico da interface do projeto (JSON/YAML).

Notas:
- JSON é o formato usual do arquivo de interface; YAML é alternativo.
- O formato é inferido pela extensão do arquivo.
- Este é o único ponto de I/O do pacote; o compilador nunca o chama.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import (
    InterfaceFileNotFoundError,
    InterfaceParseError,
    InterfacePathMissingError,
    UnsupportedInterfaceFormatError,
)
from .schema import validate_project_interface
from .types import ProjectInterface


def load_interface_document(*, path: Optional[str]) -> Dict[str, Any]:
    """Carrega o documento de interface a partir de JSON/YAML, sem validar o schema.

    Args:
        path: caminho para o arquivo de interface.

    Raises:
        InterfacePathMissingError: se path estiver ausente.
        InterfaceFileNotFoundError: se arquivo não existir.
        UnsupportedInterfaceFormatError: se extensão não suportada.
        InterfaceParseError: se parsing falhar.
    """
    if not path or not str(path).strip():
        raise InterfacePathMissingError("interface path is required")

    p = Path(path)
    if not p.exists():
        raise InterfaceFileNotFoundError(f"interface file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw) if raw.strip() else None
        else:
            raise UnsupportedInterfaceFormatError(f"unsupported interface format: {suffix}")
    except UnsupportedInterfaceFormatError:
        raise
    except Exception as e:
        raise InterfaceParseError(str(e) or "failed to parse interface") from e

    if data is None:
        raise InterfaceParseError("interface file is empty")

    if not isinstance(data, dict):
        raise InterfaceParseError("interface root must be a mapping/dict")

    return data


def load_project_interface(*, path: Optional[str]) -> ProjectInterface:
    """Carrega e valida a interface do projeto.

    Raises:
        InterfaceError: qualquer falha de carregamento ou de schema.
    """
    return validate_project_interface(load_interface_document(path=path))
