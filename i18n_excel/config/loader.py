from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/i18n.yml``)
- Validate it against the bundled ``config_schema.json`` (no extra keys)
- Apply defaults for every path the commands need

The defaults mirror the conventional project layout
(``input/i18n.xlsx`` -> ``output/i18n.json`` -> ``output/i18n.xlsx``).
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/i18n.yml")
CONFIG_ENV_VAR = "I18N_EXCEL_CONFIG"

DEFAULT_EXCEL_INPUT = "input/i18n.xlsx"
DEFAULT_JSON_OUTPUT = "output/i18n.json"
DEFAULT_EXCEL_OUTPUT = "output/i18n.xlsx"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ConverterConfig:
    excel_input: Path
    json_output: Path
    excel_output: Path
    sheet: str | int = 0
    skip_log_dir: Path | None = None


def default_config() -> ConverterConfig:
    return ConverterConfig(
        excel_input=Path(DEFAULT_EXCEL_INPUT),
        json_output=Path(DEFAULT_JSON_OUTPUT),
        excel_output=Path(DEFAULT_EXCEL_OUTPUT),
    )


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path | None = None) -> ConverterConfig:
    """Load configuration.

    With ``path=None`` the default location is used and a missing file simply
    yields the defaults. An explicitly given path must exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return default_config()
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    skip_dir = data.get("skip_log_dir")
    return ConverterConfig(
        excel_input=Path(data.get("excel_input", DEFAULT_EXCEL_INPUT)),
        json_output=Path(data.get("json_output", DEFAULT_JSON_OUTPUT)),
        excel_output=Path(data.get("excel_output", DEFAULT_EXCEL_OUTPUT)),
        sheet=data.get("sheet", 0),
        skip_log_dir=Path(skip_dir) if skip_dir else None,
    )
