# live_process/contracts.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROCESS_SCHEMA_URI = "https://specs.livecontracts.io/v0.2.0/process/schema.json#"
RESPONSE_SCHEMA_URI = "https://specs.livecontracts.io/v0.2.0/response/schema.json#"

DEFAULT_RESPONSE_KEY = "ok"


# ------------------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------------------


class ProcessError(Exception):
    """Base class for every error raised by a live contracts process."""


class ProcessUsageError(ProcessError, RuntimeError):
    """The caller broke the process contract. Never retried at this layer."""


class ScenarioAlreadyBoundError(ProcessUsageError):
    pass


class ScenarioNotBoundError(ProcessUsageError):
    pass


class UnknownActionError(ProcessUsageError, LookupError):
    def __init__(self, action_key: str) -> None:
        super().__init__(f"scenario has no action {action_key!r}")
        self.action_key = action_key


class ScenarioLoadError(ProcessError):
    """The scenario loader could not find or parse a scenario source."""

    def __init__(self, name: str, path: str, reason: str) -> None:
        super().__init__(f"failed to load scenario {name!r} from {path!r}: {reason}")
        self.name = name
        self.path = path
        self.reason = reason


# ------------------------------------------------------------------------------
# Shared BaseModel config helpers
# ------------------------------------------------------------------------------

# Scenario documents belong to the scenario author; unknown keys are kept verbatim.
_OPEN_CONTRACT_CONFIG = ConfigDict(
    extra="allow",
    populate_by_name=True,
)

_IMMUTABLE_CONTRACT_CONFIG = ConfigDict(
    extra="forbid",
    populate_by_name=True,
    frozen=True,
)


# ------------------------------------------------------------------------------
# Scenario
# ------------------------------------------------------------------------------


class ActionDescriptor(BaseModel):
    model_config = _OPEN_CONTRACT_CONFIG
    default_response: str | None = None


class ScenarioDescriptor(BaseModel):
    """
    A scenario as materialized by a scenario loader.

    Only `id` and `actions` are interpreted here. Everything else in the
    document (`$schema`, `title`, `states`, ...) rides along untouched.
    """

    model_config = _OPEN_CONTRACT_CONFIG
    id: str | None = None
    actions: dict[str, ActionDescriptor] = Field(default_factory=dict)

    @field_validator("actions", mode="before")
    @classmethod
    def _normalize_actions(cls, value: object) -> object:
        if value is None:
            return {}
        if isinstance(value, list):
            out: dict[str, object] = {}
            for item in value:
                if not isinstance(item, Mapping) or not isinstance(item.get("key"), str):
                    raise ValueError("actions given as a list must be objects with a string 'key'")
                out[item["key"]] = {k: v for k, v in item.items() if k != "key"}
            return out
        return value

    def default_response_for(self, action_key: str) -> str | None:
        try:
            action = self.actions[action_key]
        except KeyError:
            raise UnknownActionError(action_key) from None
        return action.default_response


# ------------------------------------------------------------------------------
# Produced payloads
# ------------------------------------------------------------------------------


class ActionRef(BaseModel):
    model_config = _IMMUTABLE_CONTRACT_CONFIG
    key: str


class ActionResponse(BaseModel):
    """Response envelope emitted for an action of a process."""

    model_config = _IMMUTABLE_CONTRACT_CONFIG
    schema_uri: str = Field(default=RESPONSE_SCHEMA_URI, alias="$schema")
    process: str = Field(min_length=1)
    action: ActionRef
    key: str
    data: Any = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ProcessRecord(BaseModel):
    """Serialized form of a process. Runtime-only state has no field here."""

    model_config = _IMMUTABLE_CONTRACT_CONFIG
    schema_uri: str = Field(default=PROCESS_SCHEMA_URI, alias="$schema")
    id: str = Field(min_length=1)
    scenario: ScenarioDescriptor | None = None
    actors: list[Any] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
