# live_process/adapters/persistence.py
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterator, Tuple, Union

from pydantic import BaseModel

from live_process.contracts import ProcessRecord

if TYPE_CHECKING:
    from live_process.process import Process


JsonObj = Dict[str, Any]
PathLike = Union[str, Path]

PROCESSES_LOG_PATH = Path("artifacts/processes.jsonl")


def to_jsonable(x: Any) -> Any:
    if x is None:
        return None
    if isinstance(x, BaseModel):
        return x.model_dump(mode="json", by_alias=True)
    if is_dataclass(x) and not isinstance(x, type):
        return asdict(x)
    if isinstance(x, dict):
        return {str(k): to_jsonable(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [to_jsonable(v) for v in x]
    return x


def append_jsonl(path: PathLike, record: Any) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    obj = to_jsonable(record)

    # enforce "one JSON object per line"
    line = json.dumps(obj, ensure_ascii=False)
    with p.open("a", encoding="utf-8") as f:
        f.write(line + "\n")


def read_jsonl(path: PathLike) -> Iterator[Tuple[JsonObj, JsonObj]]:
    """
    Yields (meta, obj) for each JSON object line.
    - meta includes line number and source path.
    - obj is the parsed dict.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            s = line.strip()
            if not s:
                continue
            obj = json.loads(s)
            if not isinstance(obj, dict):
                raise ValueError(f"Expected JSON object on line {lineno}, got {type(obj).__name__}")
            meta: JsonObj = {"path": str(p), "lineno": lineno}
            yield meta, obj


def append_process(path: PathLike = PROCESSES_LOG_PATH, process: Process | None = None) -> JsonObj:
    if process is None:
        raise ValueError("process is required")
    p = Path(path)
    next_offset = 1
    if p.exists():
        next_offset = len(p.read_text(encoding="utf-8").splitlines()) + 1

    payload = process.serialize()
    # Validate persistence/reload parity before writing.
    ProcessRecord.model_validate(payload)
    append_jsonl(p, payload)
    return {"kind": "jsonl", "ref": f"{p.name}@{next_offset}"}


def read_process_records(path: PathLike) -> Iterator[ProcessRecord]:
    for _, rec in read_jsonl(path):
        yield ProcessRecord.model_validate(rec)
