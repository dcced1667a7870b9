"""Reader for the hidden commit types declared in a ``.versionrc`` file.

The file follows the conventional-changelog configuration schema::

    {
        "types": [
            {"type": "feat", "section": "Features"},
            {"type": "chore", "hidden": true}
        ]
    }

Reading never raises: a missing or unreadable file yields an empty result,
and entries that fail validation are collected as ``MalformedEntry`` records.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class CommitTypeEntry(BaseModel):
    """A single entry of the ``types`` array."""

    model_config = ConfigDict(extra="ignore")

    type: str
    section: str | None = None
    hidden: bool = False

    @field_validator("type")
    @classmethod
    def type_not_empty(cls, v: str) -> str:
        if not v:
            msg = "type cannot be empty"
            raise ValueError(msg)
        return v


@dataclass(frozen=True)
class MalformedEntry:
    """A ``types`` entry that could not be validated."""

    index: int
    reason: str


@dataclass
class VersionrcConfig:
    """Parsed view of a ``.versionrc`` file."""

    path: Path
    exists: bool = False
    entries: list[CommitTypeEntry] = field(default_factory=list)
    malformed: list[MalformedEntry] = field(default_factory=list)

    @property
    def hidden_types(self) -> frozenset[str]:
        return frozenset(entry.type for entry in self.entries if entry.hidden)


def _validation_reason(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'entry'}: {err['msg']}"
        for err in error.errors()
    )


def load_versionrc(versionrc_path: str | Path) -> VersionrcConfig:
    """Load and validate the commit types declared in a ``.versionrc`` file.

    Args:
        versionrc_path: Path to the configuration file

    Returns:
        VersionrcConfig with valid entries and any malformed ones
    """
    path = Path(versionrc_path)
    config = VersionrcConfig(path=path)

    if not path.exists():
        logger.info(f'"{path}" does not exist, no commit types are hidden')
        return config

    config.exists = True
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f'Could not read "{path}" as JSON, no commit types are hidden: {e}')
        return config

    if not isinstance(data, dict):
        logger.warning(f'"{path}" is not a JSON object, no commit types are hidden')
        return config

    raw_types = data.get("types", [])
    if not isinstance(raw_types, list):
        logger.warning(f'"types" in "{path}" is not a list, no commit types are hidden')
        return config

    for index, raw in enumerate(raw_types):
        try:
            config.entries.append(CommitTypeEntry.model_validate(raw))
        except ValidationError as e:
            entry = MalformedEntry(index=index, reason=_validation_reason(e))
            logger.warning(f'Ignoring malformed entry #{index} in "{path}": {entry.reason}')
            config.malformed.append(entry)

    logger.debug(
        f"Loaded {len(config.entries)} commit types from {path} "
        f"({len(config.hidden_types)} hidden, {len(config.malformed)} malformed)"
    )
    return config


def get_excluded_commit_types(versionrc_path: str | Path) -> frozenset[str]:
    """Return the commit types marked ``"hidden": true`` in ``versionrc_path``."""
    return load_versionrc(versionrc_path).hidden_types
