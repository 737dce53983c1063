"""Credentials configuration: load and save credential fragments."""

from __future__ import annotations

import json
import os
import stat
from collections.abc import Mapping
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from creatorpy.errors import CredentialsError
from creatorpy.models import Credentials

CREDENTIALS_FILE = ".creator_auth.json"
ENV_PREFIX = "CREATORPY_"

# Environment variable suffix -> Credentials field
ENV_FIELDS = {
    "USER_AGENT": "user_agent",
    "XBC": "xbc",
    "AUTH_ID": "auth_id",
    "TWO_FACTOR": "two_factor",
    "SESSION": "session_token",
    "PROXY": "proxy",
}


def default_credentials_path() -> Path:
    return Path.cwd() / CREDENTIALS_FILE


def load_credentials(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Credentials:
    """Load credentials from a JSON file, overlaid with environment variables.

    A missing file is not an error; environment values win over file values.
    """
    path = path or default_credentials_path()
    environ = os.environ if environ is None else environ

    data: dict[str, object] = {}
    if path.exists():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CredentialsError(f"Invalid JSON in {path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CredentialsError(f"Cannot read {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise CredentialsError(f"Expected a JSON object in {path}")
        logger.debug("Loaded credentials file {} (keys={})", path, sorted(raw))
        data.update(raw)

    try:
        credentials = Credentials.model_validate(data)
    except ValidationError as exc:
        raise CredentialsError(f"Invalid credentials in {path}: {exc}") from exc

    overrides = {
        field: environ[ENV_PREFIX + suffix]
        for suffix, field in ENV_FIELDS.items()
        if environ.get(ENV_PREFIX + suffix, "").strip()
    }
    if overrides:
        logger.debug("Credential overrides from environment: {}", sorted(overrides))
        credentials = credentials.model_copy(update=overrides)
    return credentials


def save_credentials(credentials: Credentials, path: Path | None = None) -> Path:
    """Persist credentials to disk with owner-only permissions."""
    path = path or default_credentials_path()
    payload = credentials.model_dump(exclude_none=True)
    path.write_text(json.dumps(payload, indent=2))
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)  # 0600
    return path
