# live_process/scenario_loader.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import ValidationError

from live_process.contracts import ScenarioDescriptor, ScenarioLoadError
from live_process.settings import get_settings

logger = logging.getLogger(__name__)

SCENARIO_FILENAME = "scenario.json"


class ScenarioLoader:
    """
    Loads scenario JSON documents from disk.

    A path may point at a JSON file or at a directory holding `scenario.json`.
    Parsed scenarios are cached per (name, file); callers always receive a
    deep copy, so setting `id` on one never leaks into another.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self.root = Path(root) if root is not None else get_settings().scenario_root
        self._cache: Dict[Tuple[str, Path], ScenarioDescriptor] = {}

    def resolve(self, path: str) -> Path:
        p = Path(path)
        if not p.is_absolute():
            p = self.root / p
        if p.is_dir():
            p = p / SCENARIO_FILENAME
        return p

    def load(self, name: str, path: str) -> ScenarioDescriptor:
        file = self.resolve(path)
        cached = self._cache.get((name, file))
        if cached is None:
            cached = self._parse(name, path, file)
            self._cache[(name, file)] = cached
        else:
            logger.debug("scenario %s served from cache (%s)", name, file)
        return cached.model_copy(deep=True)

    def clear(self) -> None:
        self._cache.clear()

    def _parse(self, name: str, path: str, file: Path) -> ScenarioDescriptor:
        try:
            raw = json.loads(file.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ScenarioLoadError(name, path, f"no scenario at {file}") from exc
        except OSError as exc:
            raise ScenarioLoadError(name, path, str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise ScenarioLoadError(name, path, f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc

        if not isinstance(raw, dict):
            raise ScenarioLoadError(name, path, f"expected a JSON object, got {type(raw).__name__}")

        try:
            scenario = ScenarioDescriptor.model_validate(raw)
        except ValidationError as exc:
            raise ScenarioLoadError(name, path, f"{exc.error_count()} validation error(s)") from exc

        logger.debug("parsed scenario %s from %s (%d actions)", name, file, len(scenario.actions))
        return scenario
