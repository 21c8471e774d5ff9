# live_process/process.py
"""
Representation of a running Live Contracts process.

A process is bound to one event chain for its whole life. The chain mints the
process and scenario identifiers and stamps the cached projection: the cache
is only served while the chain head still matches the hash recorded when the
projection was stored.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from live_process.adapters.persistence import to_jsonable
from live_process.contracts import (
    DEFAULT_RESPONSE_KEY,
    PROCESS_SCHEMA_URI,
    ActionRef,
    ActionResponse,
    ProcessRecord,
    ScenarioAlreadyBoundError,
    ScenarioDescriptor,
    ScenarioLoadError,
    ScenarioNotBoundError,
)
from live_process.ports import EventChainLike, ScenarioLoaderLike

logger = logging.getLogger(__name__)

Projection = Mapping[str, Any]


class Process:
    schema: str = PROCESS_SCHEMA_URI

    def __init__(self, chain: EventChainLike, ref: Optional[str] = None) -> None:
        self._chain = chain
        self.id: str = self._mint_id(ref)
        self.scenario: Optional[ScenarioDescriptor] = None
        self.actors: list[Any] = []
        self._projection: Optional[Projection] = None
        # Chain head at the time the projection was stored.
        self._projection_source_hash: Optional[str] = None

    def __repr__(self) -> str:
        return f"Process(id={self.id!r}, scenario={self.scenario.id if self.scenario else None!r})"

    @property
    def chain(self) -> EventChainLike:
        return self._chain

    def _mint_id(self, ref: Optional[str]) -> str:
        resource_id = self._chain.create_resource_id(ref)
        if not resource_id:
            raise ValueError(f"event chain returned an empty resource id for ref {ref!r}")
        logger.debug("derived resource id %s from ref %r", resource_id, ref)
        return resource_id

    # --------------------------------------------------------------------------
    # Scenario
    # --------------------------------------------------------------------------

    def load_scenario(self, name: str, path: str, *, loader: ScenarioLoaderLike) -> None:
        """
        Bind a scenario. Allowed once per process.

        Raises ScenarioAlreadyBoundError before touching any state when a
        scenario is already bound. A failed load raises ScenarioLoadError;
        the process id may already be re-derived at that point and the
        instance should be discarded.
        """
        if self.scenario is not None:
            raise ScenarioAlreadyBoundError(f"scenario already set for process {self.id}")

        self.id = self._mint_id(f"process:{name}")

        try:
            scenario = loader.load(name, path)
        except ScenarioLoadError:
            raise
        except Exception as exc:
            raise ScenarioLoadError(name, path, str(exc) or type(exc).__name__) from exc

        scenario.id = self._mint_id(f"scenario:{path}")
        self.scenario = scenario
        logger.info("process %s bound to scenario %s (%s)", self.id, name, scenario.id)

    # --------------------------------------------------------------------------
    # Responses
    # --------------------------------------------------------------------------

    def create_response(self, action_key: str, key: Optional[str] = None, data: Any = None) -> ActionResponse:
        if key is None:
            if self.scenario is None:
                raise ScenarioNotBoundError(
                    f"cannot resolve default response for {action_key!r}: no scenario bound to process {self.id}"
                )
            default = self.scenario.default_response_for(action_key)
            key = default if default is not None else DEFAULT_RESPONSE_KEY

        return ActionResponse(
            process=self.id,
            action=ActionRef(key=action_key),
            key=key,
            data=data,
        )

    # --------------------------------------------------------------------------
    # Projection cache
    # --------------------------------------------------------------------------

    @property
    def projection_is_current(self) -> bool:
        return (
            self._projection_source_hash is not None
            and self._projection_source_hash == self._chain.get_latest_hash()
        )

    def get_projection(self) -> Optional[Projection]:
        if self.projection_is_current:
            return self._projection
        if self._projection is not None:
            logger.debug("projection of process %s is stale, chain head moved", self.id)
        return None

    def set_projection(self, projection: Projection) -> None:
        self._projection = projection
        self._projection_source_hash = self._chain.get_latest_hash()
        logger.debug("projection of process %s stamped at %s", self.id, self._projection_source_hash)

    # --------------------------------------------------------------------------
    # Actors / serialization
    # --------------------------------------------------------------------------

    def add_actor(self, actor: Any) -> None:
        self.actors.append(actor)

    def serialize(self) -> dict[str, Any]:
        return {
            "$schema": self.schema,
            "id": self.id,
            "scenario": to_jsonable(self.scenario),
            "actors": to_jsonable(list(self.actors)),
        }

    def to_record(self) -> ProcessRecord:
        return ProcessRecord.model_validate(self.serialize())
