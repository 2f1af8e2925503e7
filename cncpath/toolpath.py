"""Ordered, append-only sequence of toolpath moves with analysis helpers."""

from __future__ import annotations

from typing import Dict, Iterator, List

from cncpath.geometry import AABB, Vec3
from cncpath.move import DEFAULT_RAPID_RATE, ToolpathMove
from cncpath.state import ToolpathState


class Toolpath:
    """A complete toolpath: moves in execution order plus per-tool usage counts."""

    def __init__(self, id: str = "", machine_id: str = "") -> None:
        self.id = id
        self.machine_id = machine_id
        self._moves: List[ToolpathMove] = []
        self._tool_usage: Dict[str, int] = {}

    def __repr__(self) -> str:
        return (
            f"Toolpath(id={self.id!r}, machine_id={self.machine_id!r}, "
            f"moves={len(self._moves)})"
        )

    def append_move(self, move: ToolpathMove) -> None:
        """Add a move at the end and count the tool active at its end state."""
        self._moves.append(move)
        end = move.end_state
        if end.has_active_tool():
            tool_id = end.active_tool_id
            self._tool_usage[tool_id] = self._tool_usage.get(tool_id, 0) + 1

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[ToolpathMove]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> ToolpathMove:
        return self._moves[index]

    def is_empty(self) -> bool:
        """True if the toolpath holds no moves."""
        return not self._moves

    def bounding_box(self) -> AABB:
        """Axis-aligned box around every start and end position."""
        if not self._moves:
            return AABB()
        positions = [
            state.position
            for move in self._moves
            for state in (move.start_state, move.end_state)
        ]
        return AABB(
            Vec3(
                min(p.x for p in positions),
                min(p.y for p in positions),
                min(p.z for p in positions),
            ),
            Vec3(
                max(p.x for p in positions),
                max(p.y for p in positions),
                max(p.z for p in positions),
            ),
        )

    def total_length(self) -> float:
        """Sum of the lengths of all moves."""
        return sum((move.length() for move in self._moves), 0.0)

    def estimated_machining_time(
        self, default_rapid_rate: float = DEFAULT_RAPID_RATE
    ) -> float:
        """Sum of the estimated times of all moves, in seconds."""
        return sum(
            (move.estimated_time(default_rapid_rate) for move in self._moves), 0.0
        )

    def tool_usage_summary(self) -> Dict[str, int]:
        """Map of tool ID to the number of moves that end with that tool active."""
        return dict(self._tool_usage)

    def used_tool_ids(self) -> List[str]:
        """IDs of all tools used, in order of first use."""
        return list(self._tool_usage)

    def first_state(self) -> ToolpathState:
        """Start state of the first move, or a state at the origin if empty."""
        if not self._moves:
            return ToolpathState(Vec3(0.0, 0.0, 0.0))
        return self._moves[0].start_state

    def last_state(self) -> ToolpathState:
        """End state of the last move, or a state at the origin if empty."""
        if not self._moves:
            return ToolpathState(Vec3(0.0, 0.0, 0.0))
        return self._moves[-1].end_state

    def is_valid(self) -> bool:
        """True if every move is valid."""
        return all(move.is_valid() for move in self._moves)