"""Resolve Docker-style ``*_FILE`` secrets into plain environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, MutableMapping, Optional

logger = logging.getLogger(__name__)

SECRET_SUFFIX = "_FILE"


def _warn(event: str, key: str, path: str, exc: Exception) -> None:
    logger.warning(event, extra={"key": key, "path": path, "error": str(exc)})


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Expose the content of every ``KEY_FILE`` entry as ``KEY``.

    Keys that are already set are left alone, so an explicit
    ``SMTP_PASSWORD`` wins over ``SMTP_PASSWORD_FILE``. Unreadable files are
    logged and skipped.

    Returns:
        The names of the variables that were populated.
    """
    env = os.environ if environ is None else environ
    resolved: List[str] = []

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_SUFFIX)]
        if env.get(target_key):
            continue

        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            _warn("env.secret_file.missing", key, file_path, exc)
        except UnicodeDecodeError as exc:
            _warn("env.secret_file.decode_failed", key, file_path, exc)
        except OSError as exc:
            _warn("env.secret_file.load_failed", key, file_path, exc)
        else:
            resolved.append(target_key)

    return resolved


load_secret_file_variables()
