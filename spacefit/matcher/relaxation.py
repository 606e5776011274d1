#!/usr/bin/env python3
"""
Threshold Relaxation - T60 -> T50 -> T40 -> T30 (floor).

Each rung filters the Match Finder's output at its threshold. The first
non-empty rung wins and no lower rung is consulted. The floor rung is
terminal: empty there means "none found".
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from spacefit.scorer.models import MatchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelaxationOutcome:
    """Result of walking the ladder."""
    threshold: Optional[int]  # None: nothing cleared the floor
    matches: Tuple[MatchResult, ...] = field(default_factory=tuple)
    consulted: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.threshold is not None


class ThresholdLadder:
    """Finite state machine over descending acceptance thresholds."""

    def __init__(self, thresholds: Sequence[int] = (60, 50, 40, 30), floor: int = 30):
        rungs = sorted({t for t in thresholds if t >= floor}, reverse=True)
        if not rungs or rungs[-1] != floor:
            rungs.append(floor)
        self.rungs: Tuple[int, ...] = tuple(rungs)
        self.floor = floor

    def next_rung(self, current: int) -> Optional[int]:
        """The next lower threshold, or None when current is the floor."""
        index = self.rungs.index(current)
        if index + 1 >= len(self.rungs):
            return None
        return self.rungs[index + 1]

    def select(self, matches: Sequence[MatchResult]) -> RelaxationOutcome:
        consulted: List[int] = []
        state: Optional[int] = self.rungs[0]

        while state is not None:
            consulted.append(state)
            accepted = tuple(m for m in matches if m.score >= state)
            if accepted:
                if state != self.rungs[0]:
                    logger.info(f"Relaxed match threshold to {state} ({len(accepted)} matches)")
                return RelaxationOutcome(threshold=state, matches=accepted, consulted=tuple(consulted))
            state = self.next_rung(state)

        logger.info(f"No matches at or above floor {self.floor}")
        return RelaxationOutcome(threshold=None, matches=(), consulted=tuple(consulted))
