# -*- coding: utf-8 -*-
"""
Pairing solver: distribute files over nodes two at a time.

Algorithm (deterministic, single pass):
  1) Sort items ascending by size.
  2) Pick a container: the largest untouched one while any remain, else the
     least loaded processed one.
  3) One item left: try it on that container only, then stop.
  4) Otherwise try the smallest and the largest item on the same container
     (smallest first).
       - both placed       -> next container
       - one rejected      -> retry from the end whose next item lies farther
                              from the fixed mean (smallest end on a tie)
       - both rejected     -> retry the smallest end, then the largest end
     A retry keeps drawing from its end until one insertion succeeds or no
     items remain. Every rejected item is final: it is never tried again.
  5) Release the container to the touched pool and repeat until no items remain.

The control flow is an explicit state machine over `Phase`; each handler
returns the next phase and every handler except SELECTING_CONTAINER
consumes at least one item, so the run terminates.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional

from distributor.business_objects.errors import ConfigurationError
from distributor.business_objects.items import Item
from distributor.heuristics.mean_distance import End, choose_retry_end, fixed_mean
from distributor.planning.policy import Policy
from distributor.planning.pools import ContainerPools
from distributor.planning.solution import AttemptRecord, Solution
from distributor.planning.state import Container, RuntimeState
from distributor.planning.tracker import Tracker

logger = logging.getLogger(__name__)


class Phase(Enum):
    SELECTING_CONTAINER = "selecting_container"
    ATTEMPTING_PAIR = "attempting_pair"
    RETRYING_SMALLEST = "retrying_smallest"
    RETRYING_LARGEST = "retrying_largest"
    DONE = "done"


_RETRY_PHASE = {
    End.SMALLEST: Phase.RETRYING_SMALLEST,
    End.LARGEST: Phase.RETRYING_LARGEST,
}


@dataclass
class _Run:
    """Mutable bookkeeping for one pass of the state machine."""
    queue: Deque[Item]
    pools: ContainerPools
    mean: float
    tracker: Optional[Tracker] = None
    current: Optional[Container] = None
    pending: Deque[Phase] = field(default_factory=deque)
    assignments: Dict[str, Optional[str]] = field(default_factory=dict)
    attempts: List[AttemptRecord] = field(default_factory=list)
    rounds: int = 0

    def take(self, end: End) -> Item:
        if end is End.SMALLEST:
            return self.queue.popleft()
        return self.queue.pop()

    def attempt(self, item: Item, phase: Phase) -> bool:
        c = self.current
        placed = c.try_insert(item)  # type: ignore[union-attr]
        self.assignments[item.id] = c.id if placed else None
        rec = AttemptRecord(
            step=len(self.attempts),
            item_id=item.id,
            container_id=c.id,
            size=item.size,
            placed=placed,
            phase=phase.value,
        )
        self.attempts.append(rec)
        if self.tracker is not None:
            self.tracker.append_attempt(rec, occupied_after=c.occupied)
        return placed

    def next_pending(self) -> Phase:
        if self.pending:
            return self.pending.popleft()
        return Phase.SELECTING_CONTAINER


# -----------------------------
# Phase handlers
# -----------------------------

def _select_container(run: _Run) -> Phase:
    if run.current is not None:
        run.pools.release(run.current)
        run.current = None
    if not run.queue:
        return Phase.DONE

    run.current = run.pools.next_container()
    run.rounds += 1
    logger.debug(
        "Round %d: container %s (capacity=%d, occupied=%d), %d item(s) left",
        run.rounds, run.current.id, run.current.capacity, run.current.occupied, len(run.queue),
    )
    return Phase.ATTEMPTING_PAIR


def _attempt_pair(run: _Run) -> Phase:
    if len(run.queue) == 1:
        run.attempt(run.queue.pop(), Phase.ATTEMPTING_PAIR)
        return Phase.DONE

    smallest = run.take(End.SMALLEST)
    largest = run.take(End.LARGEST)
    ok_small = run.attempt(smallest, Phase.ATTEMPTING_PAIR)
    ok_large = run.attempt(largest, Phase.ATTEMPTING_PAIR)

    if ok_small and ok_large:
        return Phase.SELECTING_CONTAINER

    if ok_small or ok_large:
        end = choose_retry_end(run.queue, run.mean)
        if end is not None:
            logger.debug("Pair rejected one item; retrying from the %s end", end.value)
            run.pending.append(_RETRY_PHASE[end])
    else:
        run.pending.extend((Phase.RETRYING_SMALLEST, Phase.RETRYING_LARGEST))
    return run.next_pending()


def _retry(end: End, phase: Phase) -> Callable[[_Run], Phase]:
    def handler(run: _Run) -> Phase:
        if not run.queue:
            run.pending.clear()
            return Phase.SELECTING_CONTAINER
        if run.attempt(run.take(end), phase):
            return run.next_pending()
        return phase
    return handler


_HANDLERS: Dict[Phase, Callable[[_Run], Phase]] = {
    Phase.SELECTING_CONTAINER: _select_container,
    Phase.ATTEMPTING_PAIR: _attempt_pair,
    Phase.RETRYING_SMALLEST: _retry(End.SMALLEST, Phase.RETRYING_SMALLEST),
    Phase.RETRYING_LARGEST: _retry(End.LARGEST, Phase.RETRYING_LARGEST),
}


# -----------------------------
# Entry point
# -----------------------------

def _loads(state: RuntimeState) -> Dict[str, int]:
    return {c.id: c.occupied for c in state.containers}


def run_pairing(
    state: RuntimeState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Distribute all items of `state` over its containers.

    Parameters
    ----------
    state : RuntimeState
        Items and fresh runtime containers; containers are mutated in place.
    policy : Policy | None
        Uses policy.integer_mean. Defaults to Policy().
    tracker : Tracker | None
        If provided, every insertion attempt is appended to attempt_log.csv.

    Returns
    -------
    Solution
        One entry per item (container id or None) plus final loads.

    Raises
    ------
    ConfigurationError
        Items were supplied but there are no containers. Raised before any
        item is consumed, so there is no partial result.
    """
    policy = policy or Policy()

    if not state.items:
        logger.debug("No items to distribute.")
        return Solution(assignments={}, occupied=_loads(state), mean=None)

    if not state.containers:
        raise ConfigurationError(
            f"Cannot distribute {len(state.items)} item(s): no containers were supplied. "
            "Provide at least one node."
        )

    total_size = sum(it.size for it in state.items)
    mean = fixed_mean(total_size, len(state.containers), integer=policy.integer_mean)

    pools = ContainerPools()
    for c in state.containers:
        pools.add(c)

    run = _Run(queue=deque(sorted(state.items)), pools=pools, mean=mean, tracker=tracker)
    logger.debug(
        "Distributing %d item(s) (total size %d) over %d container(s), mean %.2f",
        len(run.queue), total_size, len(pools), mean,
    )

    phase = Phase.SELECTING_CONTAINER
    while phase is not Phase.DONE:
        phase = _HANDLERS[phase](run)

    if run.current is not None:
        run.pools.release(run.current)

    return Solution(
        assignments=run.assignments,
        occupied=_loads(state),
        mean=mean,
        attempts=tuple(run.attempts),
    )
