from live_process.contracts import (
    DEFAULT_RESPONSE_KEY,
    PROCESS_SCHEMA_URI,
    RESPONSE_SCHEMA_URI,
    ActionDescriptor,
    ActionRef,
    ActionResponse,
    ProcessError,
    ProcessRecord,
    ProcessUsageError,
    ScenarioAlreadyBoundError,
    ScenarioDescriptor,
    ScenarioLoadError,
    ScenarioNotBoundError,
    UnknownActionError,
)
from live_process.event_chain import ChainEvent, EventChain
from live_process.ports import EventChainLike, ScenarioLoaderLike
from live_process.process import Process
from live_process.scenario_loader import ScenarioLoader

__all__ = [
    "DEFAULT_RESPONSE_KEY",
    "PROCESS_SCHEMA_URI",
    "RESPONSE_SCHEMA_URI",
    "ActionDescriptor",
    "ActionRef",
    "ActionResponse",
    "ChainEvent",
    "EventChain",
    "EventChainLike",
    "Process",
    "ProcessError",
    "ProcessRecord",
    "ProcessUsageError",
    "ScenarioAlreadyBoundError",
    "ScenarioDescriptor",
    "ScenarioLoadError",
    "ScenarioLoader",
    "ScenarioLoaderLike",
    "ScenarioNotBoundError",
    "UnknownActionError",
]
