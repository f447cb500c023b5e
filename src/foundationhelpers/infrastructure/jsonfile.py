"""JSON file and package resource persistence.

Loads degrade to None (with a logged warning) on any failure, saves raise
JSONFileError. Writes are atomic (temp file + rename).
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, is_dataclass
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, overload

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "MAX_JSON_SIZE",
    "JSONFileError",
    "decode_file",
    "decode_resource",
    "encode_file",
    "encode_resource",
    "resource_path",
]

logger = structlog.get_logger()

# Maximum JSON file size accepted by decode_file (1MB)
MAX_JSON_SIZE = 1 * 1024 * 1024

T = TypeVar("T")


class JSONFileError(Exception):
    """Raised when a JSON file cannot be written or located."""


@overload
def decode_file(path: Path, as_type: None = None) -> Any: ...


@overload
def decode_file(path: Path, as_type: Callable[..., T]) -> T | None: ...


def decode_file(path: Path, as_type: Callable[..., Any] | None = None) -> Any:
    """Load and decode a JSON file.

    Args:
        path: Path to the JSON file.
        as_type: Optional type (or factory) to build from the decoded value.
            Objects are passed as keyword arguments, anything else positionally.

    Returns:
        The decoded value, or None if the file is missing, too large,
        invalid, or cannot be converted to as_type.
    """
    if not path.exists():
        logger.debug("json_not_found", path=str(path))
        return None

    try:
        file_size = path.stat().st_size
        if file_size > MAX_JSON_SIZE:
            logger.warning(
                "json_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_JSON_SIZE,
            )
            return None

        data = json.loads(path.read_text(encoding="utf-8"))

        if as_type is None:
            return data
        if isinstance(data, dict):
            return as_type(**data)
        return as_type(data)

    except json.JSONDecodeError as e:
        logger.warning("json_invalid", path=str(path), error=str(e))
        return None
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("json_parse_error", path=str(path), error=str(e))
        return None
    except OSError as e:
        logger.warning("json_read_error", path=str(path), error=str(e))
        return None


def encode_file(obj: Any, path: Path) -> None:
    """Encode a value as JSON and write it to a file.

    Dataclass instances are converted with asdict first.

    Args:
        obj: Value to encode.
        path: Destination path (parent directories are created).

    Raises:
        JSONFileError: If the value cannot be encoded or the write fails.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)

    try:
        content = json.dumps(obj, indent=2)
    except (TypeError, ValueError) as e:
        raise JSONFileError(f"Cannot encode value as JSON: {e}") from e

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(content)

        tmp_path.replace(path)

        logger.debug("json_saved", path=str(path))

    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise JSONFileError(f"Failed to write {path}: {e}") from e


def resource_path(package: str, name: str) -> Path | None:
    """Locate a file bundled inside an importable package.

    Args:
        package: Dotted package name (e.g. "myapp.data").
        name: File name, including extension, relative to the package.

    Returns:
        Path to the resource, or None if the package or file is missing.
    """
    try:
        path = Path(str(files(package) / name))
    except ModuleNotFoundError:
        logger.warning("resource_package_not_found", package=package)
        return None
    except TypeError as e:
        # files() raises TypeError for plain modules and namespace edge cases
        logger.warning("resource_package_invalid", package=package, error=str(e))
        return None

    if not path.is_file():
        logger.warning("resource_not_found", package=package, name=name)
        return None

    return path


def decode_resource(
    package: str, name: str, as_type: Callable[..., Any] | None = None
) -> Any:
    """Load and decode a JSON file bundled inside a package.

    Args:
        package: Dotted package name.
        name: File name, including extension.
        as_type: Optional type (or factory) to build from the decoded value.

    Returns:
        The decoded value, or None if the resource is missing or invalid.
    """
    path = resource_path(package, name)
    if path is None:
        return None
    return decode_file(path, as_type)


def encode_resource(obj: Any, package: str, name: str) -> None:
    """Encode a value as JSON into an existing file bundled inside a package.

    Args:
        obj: Value to encode.
        package: Dotted package name.
        name: File name, including extension.

    Raises:
        JSONFileError: If the resource does not exist or the write fails.
    """
    path = resource_path(package, name)
    if path is None:
        raise JSONFileError(f"Failed to locate {name} in package {package}")
    encode_file(obj, path)
