from __future__ import annotations

from live_process.event_chain import RESOURCE_ID_PREFIX, EventChain
from live_process.ports import EventChainLike


def test_event_chain_satisfies_port() -> None:
    assert isinstance(EventChain(), EventChainLike)


def test_empty_chain_reports_genesis_hash() -> None:
    chain = EventChain(chain_id="c")

    assert chain.get_latest_hash() == chain.genesis_hash
    assert len(chain) == 0


def test_append_links_events_and_moves_head() -> None:
    chain = EventChain(chain_id="c")

    first = chain.append({"n": 1})
    second = chain.append({"n": 2})

    assert first.previous == chain.genesis_hash
    assert second.previous == first.hash
    assert chain.get_latest_hash() == second.hash
    assert chain.events == (first, second)


def test_event_hashes_are_deterministic_across_chains_with_same_id() -> None:
    a = EventChain(chain_id="c")
    b = EventChain(chain_id="c")

    assert a.append({"k": "v", "n": 1}).hash == b.append({"n": 1, "k": "v"}).hash


def test_resource_ids_are_deterministic_for_a_ref() -> None:
    chain = EventChain(chain_id="c")

    rid = chain.create_resource_id("process:basic")

    assert rid.startswith(RESOURCE_ID_PREFIX)
    assert rid == chain.create_resource_id("process:basic")
    assert rid != chain.create_resource_id("process:other")
    assert rid != EventChain(chain_id="d").create_resource_id("process:basic")


def test_resource_ids_do_not_depend_on_chain_head() -> None:
    chain = EventChain(chain_id="c")
    before = chain.create_resource_id("x")
    chain.append({"n": 1})

    assert chain.create_resource_id("x") == before
