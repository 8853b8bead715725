import os
from collections.abc import Mapping
from dataclasses import dataclass

from stowage.core.models import ConfigurationError

URL_ENV_VAR = "STORAGE_URL"
KEY_ENV_VAR = "STORAGE_SERVICE_KEY"
DEFAULT_STORAGE_URL = "http://localhost:5000/storage/v1/"


@dataclass(frozen=True)
class StorageConfig:
    url: str
    key: str
    json_output: bool = False
    verbose: bool = False

    @property
    def headers(self) -> dict[str, str]:
        return {"apikey": self.key, "Authorization": f"Bearer {self.key}"}


def resolve_config(
    url: str | None = None,
    key: str | None = None,
    json_output: bool = False,
    verbose: bool = False,
    environ: Mapping[str, str] | None = None,
) -> StorageConfig:
    """
    Merge command-line flags with the environment.

    Flags win over environment variables, which win over the built-in
    defaults. A missing service key is rejected here so no client is ever
    built without credentials.
    """
    if environ is None:
        environ = os.environ

    resolved_url = url or environ.get(URL_ENV_VAR) or DEFAULT_STORAGE_URL
    resolved_key = key or environ.get(KEY_ENV_VAR) or ""

    if not resolved_key.strip():
        raise ConfigurationError(
            "Storage key not set",
            hint=f"Set {KEY_ENV_VAR} or use --key option",
        )

    return StorageConfig(
        # storage3 expects the endpoint to end with exactly one slash
        url=resolved_url.rstrip("/") + "/",
        key=resolved_key.strip(),
        json_output=json_output,
        verbose=verbose,
    )
