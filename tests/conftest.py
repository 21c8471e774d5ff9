from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from live_process.event_chain import EventChain
from live_process.scenario_loader import ScenarioLoader

SCENARIO_DOC: dict[str, Any] = {
    "$schema": "https://specs.livecontracts.io/v0.2.0/scenario/schema.json#",
    "title": "Basic user and system",
    "actions": {
        "submit": {"title": "Submit the form", "actor": "user", "default_response": "accepted"},
        "review": {"title": "Review the form", "actor": "system"},
    },
    "states": {
        ":initial": {"action": "submit", "transition": "reviewing"},
        "reviewing": {"action": "review", "transition": ":success"},
    },
}


@pytest.fixture
def chain() -> EventChain:
    return EventChain(chain_id="chain:test")


@pytest.fixture
def scenario_root(tmp_path: Path) -> Path:
    root = tmp_path / "scenarios"
    root.mkdir()
    return root


@pytest.fixture
def write_scenario(scenario_root: Path) -> Callable[..., str]:
    def _write_scenario(relpath: str = "basic/scenario.json", doc: Any = None) -> str:
        target = scenario_root / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = SCENARIO_DOC if doc is None else doc
        text = payload if isinstance(payload, str) else json.dumps(payload)
        target.write_text(text, encoding="utf-8")
        return relpath

    return _write_scenario


@pytest.fixture
def loader(scenario_root: Path) -> ScenarioLoader:
    return ScenarioLoader(root=scenario_root)
