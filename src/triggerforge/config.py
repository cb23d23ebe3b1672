"""
config.py: Trigger configuration for TriggerForge.

Binds entity names to the handler that processes their lifecycle events.
Bindings live in a YAML file validated against a JSON Schema:

    triggers:
      - entity: Account
        handler: AccountTriggerHandler
      - entity: Contact
        handler: ContactTriggerHandler
        active: false
        description: Disabled during data migration

Usage:
    from triggerforge.config import TriggerConfig

    config = TriggerConfig.from_env()
    binding = config.binding_for("Account")
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TRIGGERFORGE_CONFIG"
DEFAULT_CONFIG_FILE = "triggers.yaml"

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "trigger_config.schema.json"


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------


@dataclass
class ConfigIssue:
    """A single validation finding for a trigger configuration file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "triggers[0]/handler"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[ERROR] {self.file}{loc}: {self.message}"


class TriggerConfigError(ValueError):
    """Raised when a trigger configuration file cannot be loaded."""

    def __init__(self, issues: list[ConfigIssue]):
        self.issues = issues
        super().__init__("\n".join(str(issue) for issue in issues))


@dataclass
class TriggerBinding:
    """Binding of one entity to its trigger handler.

    Attributes:
        entity: Entity name whose events are routed (e.g., "Account")
        handler: Registered handler name
        active: Inactive bindings are skipped without resolving the handler
        description: Human-readable description
    """

    entity: str
    handler: str
    active: bool = True
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TriggerBinding:
        """Create TriggerBinding from YAML/JSON dict."""
        return cls(
            entity=data["entity"],
            handler=data["handler"],
            active=data.get("active", True),
            description=data.get("description", ""),
        )


@dataclass
class TriggerConfig:
    """Entity-to-handler bindings, one binding per entity."""

    bindings: list[TriggerBinding] = field(default_factory=list)
    source: Path | None = None

    def binding_for(self, entity: str) -> TriggerBinding | None:
        """Get the binding for an entity, or None if it has no trigger."""
        for binding in self.bindings:
            if binding.entity == entity:
                return binding
        return None

    @property
    def entities(self) -> list[str]:
        return [binding.entity for binding in self.bindings]

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> TriggerConfig:
        """Create TriggerConfig from an already-validated dict.

        Raises:
            TriggerConfigError: If an entity is bound more than once
        """
        bindings = [TriggerBinding.from_dict(item) for item in data.get("triggers", [])]

        issues: list[ConfigIssue] = []
        seen: set[str] = set()
        for index, binding in enumerate(bindings):
            if binding.entity in seen:
                issues.append(
                    ConfigIssue(
                        file=source or Path("<dict>"),
                        message=f"Entity '{binding.entity}' is bound more than once",
                        path=f"triggers[{index}]/entity",
                    )
                )
            seen.add(binding.entity)
        if issues:
            raise TriggerConfigError(issues)

        return cls(bindings=bindings, source=source)

    @classmethod
    def load(cls, path: Path) -> TriggerConfig:
        """Load and validate a trigger configuration file.

        Raises:
            TriggerConfigError: If the file is missing, unparseable, fails
                schema validation, or binds an entity twice
        """
        issues = validate_config_file(path)
        if issues:
            raise TriggerConfigError(issues)

        with path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        config = cls.from_dict(data, source=path)
        logger.debug("Loaded %d trigger binding(s) from %s", len(config.bindings), path)
        return config

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> TriggerConfig:
        """Load configuration from the environment.

        See :meth:`resolve_path` for the lookup order.
        """
        return cls.load(cls.resolve_path(base_path=base_path))

    @staticmethod
    def resolve_path(path: Path | None = None, base_path: Path | None = None) -> Path:
        """Locate the trigger configuration file.

        Resolution order:
        1. Explicit ``path``
        2. TRIGGERFORGE_CONFIG env var
        3. Default: {base_path or cwd}/triggers.yaml
        """
        if path is not None:
            return path

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        return (base_path or Path.cwd()) / DEFAULT_CONFIG_FILE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open(encoding="utf-8") as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_config_file(path: Path) -> list[ConfigIssue]:
    """
    Validate a trigger configuration file without raising.

    Returns:
        A list of :class:`ConfigIssue` objects (empty on success).
    """
    if not path.is_file():
        return [ConfigIssue(file=path, message=f"Trigger config not found: {path}")]

    try:
        with path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [ConfigIssue(file=path, message=f"YAML parse error: {exc}")]
    except UnicodeDecodeError as exc:
        return [ConfigIssue(file=path, message=f"File is not valid UTF-8: {exc}")]

    if raw is None:
        return [ConfigIssue(file=path, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(_load_schema())
    issues = [
        ConfigIssue(file=path, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(raw), key=_json_path)
    ]
    if issues:
        return issues

    try:
        TriggerConfig.from_dict(raw, source=path)
    except TriggerConfigError as exc:
        return exc.issues
    return []
