# live_process/event_chain.py
from __future__ import annotations

import hashlib
import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)

RESOURCE_ID_PREFIX = "res_"


def _sha256_hex(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def _canon(obj: Any) -> str:
    """
    Canonical JSON string (stable across runs) for hashing.
    """
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class ChainEvent:
    previous: str
    body: Any
    hash: str


@dataclass
class EventChain:
    """
    Minimal append-only, hash-linked event chain.

    Each event hash covers the previous hash and the canonical body, so the
    latest hash moves on every append.
    """

    chain_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    _events: List[ChainEvent] = field(default_factory=list, init=False, repr=False)

    @property
    def genesis_hash(self) -> str:
        return _sha256_hex(self.chain_id)

    @property
    def events(self) -> Tuple[ChainEvent, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def get_latest_hash(self) -> str:
        return self._events[-1].hash if self._events else self.genesis_hash

    def append(self, body: Any) -> ChainEvent:
        previous = self.get_latest_hash()
        event = ChainEvent(previous=previous, body=body, hash=_sha256_hex(previous + _canon(body)))
        self._events.append(event)
        logger.debug("chain %s appended event %s", self.chain_id, event.hash)
        return event

    def create_resource_id(self, ref: Optional[str] = None) -> str:
        # Without a ref every call mints a fresh identifier.
        nonce = ref if ref is not None else uuid.uuid4().hex
        return RESOURCE_ID_PREFIX + _sha256_hex(_canon({"chain": self.chain_id, "ref": nonce}))
