"""Traduora connection and translation file configuration.

Values come from an optional TOML file (``.traduora.toml`` in the working
directory unless another path is given) and are overridden by ``TRADUORA_*``
environment variables::

    host = "localhost:8080"
    insecure = true
    user = "test@test.test"
    password = "12345678"
    project_id = "92047938-c050-4d9c-83f8-6b1d7fae6b01"
    locale = "en"
    translation_file = "translations/en.json"
    revision = "origin/main"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from traduora_sync import __version__

from .env import optional_env_vars, parse_flag
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_CONFIG_FILENAME: Final[str] = ".traduora.toml"
ENV_PREFIX: Final[str] = "TRADUORA_"
TRADUORA_TIMEOUT_SECONDS: Final[float] = 30.0

FIELDS: Final[tuple[str, ...]] = (
    "host",
    "user",
    "password",
    "client_id",
    "client_secret",
    "project_id",
    "locale",
    "translation_file",
    "encoding",
    "git_encoding",
    "revision",
    "insecure",
    "validate_certs",
)
_REQUIRED: Final[tuple[str, ...]] = ("host", "project_id", "locale", "translation_file")


@dataclass(frozen=True, slots=True)
class PasswordLogin:
    username: str
    password: str


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    client_id: str
    client_secret: str


type Credentials = PasswordLogin | ClientCredentials


@dataclass(frozen=True, slots=True)
class TraduoraConfig:
    """Resolved settings for one reconciliation run."""

    host: str
    credentials: Credentials
    project_id: str
    locale: str
    translation_file: Path
    local_encoding: str | None = None
    git_encoding: str | None = None
    revision: str | None = None
    insecure: bool = False
    validate_certs: bool = True

    @property
    def base_url(self) -> str:
        if self.host.startswith(("http://", "https://")):
            return self.host.rstrip("/")
        scheme = "http" if self.insecure else "https"
        return f"{scheme}://{self.host.rstrip('/')}"

    def resilience(self) -> ResilienceConfig:
        return ResilienceConfig(
            name="traduora",
            base_url=self.base_url,
            timeout_seconds=TRADUORA_TIMEOUT_SECONDS,
            verify=self.validate_certs,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={
                "Accept": "application/json",
                "User-Agent": f"traduora-sync/{__version__}",
            },
        )


def env_var_name(field_name: str) -> str:
    return f"{ENV_PREFIX}{field_name.upper()}"


def get_traduora_config(*, config_file: Path | None = None) -> TraduoraConfig:
    """Load configuration from the TOML file and the environment."""

    values: dict[str, str] = {}
    base_dir: Path | None = None

    path = config_file
    if path is None and Path(DEFAULT_CONFIG_FILENAME).is_file():
        path = Path(DEFAULT_CONFIG_FILENAME)
    if path is not None:
        values.update(read_config_file(path))
        base_dir = path.resolve().parent

    env_values = optional_env_vars([env_var_name(name) for name in FIELDS])
    env_overrides = {
        name: env_values[env_var_name(name)] for name in FIELDS if env_var_name(name) in env_values
    }
    if "translation_file" in env_overrides:
        base_dir = None
    values.update(env_overrides)

    missing = [env_var_name(name) for name in _REQUIRED if not values.get(name, "").strip()]
    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(sorted(missing))}")

    translation_file = Path(values["translation_file"]).expanduser()
    if base_dir is not None and not translation_file.is_absolute():
        translation_file = base_dir / translation_file

    return TraduoraConfig(
        host=values["host"].strip(),
        credentials=_credentials(values),
        project_id=values["project_id"].strip(),
        locale=values["locale"].strip(),
        translation_file=translation_file,
        local_encoding=values.get("encoding") or None,
        git_encoding=values.get("git_encoding") or None,
        revision=values.get("revision") or None,
        insecure=_flag(values, "insecure", default=False),
        validate_certs=_flag(values, "validate_certs", default=True),
    )


def read_config_file(path: Path) -> dict[str, str]:
    """Read a flat TOML configuration file into string values."""

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc

    unknown = sorted(set(document) - set(FIELDS))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys in {path}: {', '.join(unknown)}")

    values: dict[str, str] = {}
    for key, value in document.items():
        if isinstance(value, bool):
            values[key] = "true" if value else "false"
        elif isinstance(value, str):
            values[key] = value
        else:
            raise ConfigurationError(
                f"Configuration value {key!r} in {path} must be a string or boolean"
            )
    return values


def _credentials(values: dict[str, str]) -> Credentials:
    password_pair = (values.get("user", "").strip(), values.get("password", ""))
    client_pair = (values.get("client_id", "").strip(), values.get("client_secret", ""))
    has_password = any(password_pair)
    has_client = any(client_pair)

    if has_password and has_client:
        raise ConfigurationError(
            "Configure either user/password or client_id/client_secret, not both"
        )
    if has_client:
        if not all(client_pair):
            raise MissingConfigurationError(
                "Missing configuration for: TRADUORA_CLIENT_ID, TRADUORA_CLIENT_SECRET"
            )
        return ClientCredentials(client_id=client_pair[0], client_secret=client_pair[1])
    if not all(password_pair):
        raise MissingConfigurationError(
            "Missing configuration for: TRADUORA_PASSWORD, TRADUORA_USER "
            "(or TRADUORA_CLIENT_ID, TRADUORA_CLIENT_SECRET)"
        )
    return PasswordLogin(username=password_pair[0], password=password_pair[1])


def _flag(values: dict[str, str], name: str, *, default: bool) -> bool:
    raw = values.get(name)
    if raw is None or not raw.strip():
        return default
    return parse_flag(env_var_name(name), raw)
