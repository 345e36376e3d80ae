"""Reading TOML state documents into validated models."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from alloy.core.shared.exceptions import StateParseError, StateReadError
from alloy.ui.logging import log

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_document(path: str | os.PathLike[str], kind: str) -> dict[str, Any]:
    """Read *path* as UTF-8 and parse it as a TOML document.

    Args:
        path: File to read.
        kind: Document name used in messages ("cache" or "config").

    Raises:
        StateReadError: The file is missing, unreadable or not UTF-8.
        StateParseError: The text is not valid TOML.
    """
    path = Path(path)
    log(f"Reading {kind} from {path}", level="debug")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        msg = f"Could not read {kind} from {path}: {reason}"
        raise StateReadError(msg, path, reason) from exc

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Could not parse {kind} file {path}: {exc}"
        raise StateParseError(msg, path, str(exc)) from exc


def validate_document(model: type[ModelT], data: dict[str, Any], path: Path, kind: str) -> ModelT:
    """Build *model* from parsed TOML data.

    Raises:
        StateParseError: A value does not match the type of its field.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid {kind} file {path}: {exc}"
        raise StateParseError(msg, path, str(exc)) from exc


__all__ = ["read_document", "validate_document"]
