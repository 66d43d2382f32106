"""Rule configuration: the nine policy toggles and their JSON/YAML loader."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# camelCase key in the config file -> RuleConfig attribute
RULE_FLAGS: dict[str, str] = {
    "alphabeticalOrderFields": "alphabetical_order_fields",
    "validateSubscriptionType": "validate_subscription_type",
    "validateSubscriptionFields": "validate_subscription_fields",
    "validateQueryType": "validate_query_type",
    "validateQueryFields": "validate_query_fields",
    "validateMutationType": "validate_mutation_type",
    "validateMutationFields": "validate_mutation_fields",
    "validateTypeType": "validate_type_type",
    "validateBasicTypeFields": "validate_basic_type_fields",
}
YAML_SUFFIXES: frozenset[str] = frozenset({".yml", ".yaml"})

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when the rule configuration file is missing or malformed."""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RuleConfig:
    """Which checkers run. Every flag defaults to disabled."""

    alphabetical_order_fields: bool = False
    validate_subscription_type: bool = False
    validate_subscription_fields: bool = False
    validate_query_type: bool = False
    validate_query_fields: bool = False
    validate_mutation_type: bool = False
    validate_mutation_fields: bool = False
    validate_type_type: bool = False
    validate_basic_type_fields: bool = False

    def enabled(self, flag: str) -> bool:
        """Return the state of *flag*, given by its config-file key."""
        return bool(getattr(self, RULE_FLAGS[flag]))

    @property
    def enabled_flags(self) -> list[str]:
        """Config-file keys of all enabled flags."""
        return [key for key, attr in RULE_FLAGS.items() if getattr(self, attr)]

    @classmethod
    def from_mapping(cls, rules: dict[str, Any]) -> RuleConfig:
        """Build a RuleConfig from the ``rules`` object of a config file.

        Unrecognized keys are ignored. Recognized keys must hold booleans.
        """
        values: dict[str, bool] = {}
        for key, value in rules.items():
            attr = RULE_FLAGS.get(key)
            if attr is None:
                logger.debug("Ignoring unrecognized rule key %r", key)
                continue
            if not isinstance(value, bool):
                msg = f"rule '{key}' must be a boolean, got {type(value).__name__}"
                raise ValueError(msg)
            values[attr] = value
        return cls(**values)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _parse(text: str, config_path: Path) -> object:
    if config_path.suffix in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def load_config(config_path: Path) -> RuleConfig:
    """Read and parse a rule configuration file.

    The file is JSON unless its suffix is ``.yml``/``.yaml``. It must be an
    object with a ``rules`` object inside.

    Raises
    ------
    ConfigError
        When the file cannot be read or does not have the expected shape.
    """
    try:
        text = config_path.read_text(encoding="utf-8")
        data = _parse(text, config_path)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        msg = f"Failed to read or parse the config file {config_path}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{config_path}: config must be an object"
        raise ConfigError(msg)

    rules = data.get("rules")
    if not isinstance(rules, dict):
        msg = f"{config_path}: 'rules' must be an object"
        raise ConfigError(msg)

    try:
        config = RuleConfig.from_mapping(rules)
    except ValueError as exc:
        msg = f"{config_path}: {exc}"
        raise ConfigError(msg) from exc

    logger.debug("Loaded config %s: enabled rules %s", config_path, config.enabled_flags)
    return config
