# live_process/ports.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from live_process.contracts import ScenarioDescriptor


@runtime_checkable
class EventChainLike(Protocol):
    """The slice of an event chain a process depends on."""

    def create_resource_id(self, ref: str | None = None) -> str: ...

    def get_latest_hash(self) -> str: ...


@runtime_checkable
class ScenarioLoaderLike(Protocol):
    def load(self, name: str, path: str) -> ScenarioDescriptor: ...
