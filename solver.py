# solver.py
import json
import logging
import math
import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from cube import count_colored

logger = logging.getLogger(__name__)

QUARTER_TURNS = ("R", "R'", "L", "L'", "U", "U'", "D", "D'", "F", "F'", "B", "B'")

FACE_MAP = {"R": "Right", "L": "Left", "U": "Upper", "D": "Down", "F": "Front", "B": "Back"}


@dataclass(frozen=True)
class Solution:
    moves: List[str] = field(default_factory=list)
    total_moves: int = 0
    solving_time: float = 0.0

    def to_dict(self):
        return {"moves": list(self.moves), "totalMoves": self.total_moves, "solvingTime": self.solving_time}


def target_move_count(total_colored, rng):
    """15 moves per fully colored face, plus 5-14 moves of jitter."""
    return math.floor(total_colored / 9 * 15) + math.floor(rng.random() * 10) + 5


def generate_moves(configuration, rng: Optional[random.Random] = None, retry_rejected=True) -> List[str]:
    """
    Input:
      configuration : face name -> 9 slots, empty slots are None/""
      retry_rejected: when a draw repeats the previous move, draw again (True)
                      or drop that iteration like the legacy demo did (False)
    Returns:
      list of quarter-turn moves, no two neighbours equal
    """
    rng = rng or random.Random()
    target = target_move_count(count_colored(configuration), rng)

    moves = []
    for _ in range(target):
        move = rng.choice(QUARTER_TURNS)
        if moves and move == moves[-1]:
            if not retry_rejected:
                continue
            while move == moves[-1]:
                move = rng.choice(QUARTER_TURNS)
        moves.append(move)

    if len(moves) < target:
        logger.warning("Legacy skipping shortened the sequence: %d of %d moves", len(moves), target)
    logger.debug("Generated %d moves (target %d)", len(moves), target)
    return moves


def solve(configuration, rng: Optional[random.Random] = None, retry_rejected=True) -> Solution:
    """Mock solve with a simulated solving time of 1-4 seconds."""
    rng = rng or random.Random()
    moves = generate_moves(configuration, rng, retry_rejected)
    return Solution(moves=moves, total_moves=len(moves), solving_time=rng.random() * 3 + 1)


def timed_solve(configuration, rng: Optional[random.Random] = None, retry_rejected=True) -> Solution:
    """Mock solve reporting the measured generation time in seconds."""
    start = time.perf_counter()
    try:
        moves = generate_moves(configuration, rng, retry_rejected)
    except Exception as e:
        raise RuntimeError(f"Solver error: {e}") from e
    elapsed = time.perf_counter() - start
    return Solution(moves=moves, total_moves=len(moves), solving_time=elapsed)


def describe_move(move):
    base = move.rstrip("2'")
    suffix = move[len(base):]
    face_name = FACE_MAP.get(base)
    if face_name is None:
        return "Unknown move"
    if suffix == "":
        return f"{face_name} face clockwise"
    if suffix == "'":
        return f"{face_name} face counter-clockwise"
    if suffix == "2":
        return f"{face_name} face 180 degrees"
    return "Unknown move"


def export_solution(solution: Solution, now: Optional[datetime] = None) -> str:
    """JSON document offered as the "Export Solution" download."""
    now = now or datetime.now(timezone.utc)
    data = solution.to_dict()
    # same shape as a browser toISOString(): UTC, milliseconds, trailing Z
    data["timestamp"] = now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return json.dumps(data, indent=2)


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"rubiks-solution-{int(now.timestamp() * 1000)}.json"
