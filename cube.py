# cube.py
import random
from collections import Counter
from enum import Enum
from typing import Dict, List, Optional


class Color(str, Enum):
    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"
    GREEN = "green"


COLORS = list(Color)

# traversal order of the face-by-face input
FACES = ("front", "right", "back", "left", "top", "bottom")
FACE_NAMES = {
    "front": "Front Face",
    "right": "Right Face",
    "back": "Back Face",
    "left": "Left Face",
    "top": "Top Face",
    "bottom": "Bottom Face",
}
SLOTS_PER_FACE = 9

# what the solution view shows as "the solved cube"
SOLVED_FACE_COLORS = {
    "front": Color.GREEN,
    "right": Color.ORANGE,
    "back": Color.BLUE,
    "left": Color.RED,
    "top": Color.YELLOW,
    "bottom": Color.WHITE,
}

Configuration = Dict[str, List[Optional[Color]]]


def empty_configuration() -> Configuration:
    return {face: [None] * SLOTS_PER_FACE for face in FACES}


def solved_configuration() -> Configuration:
    return {face: [SOLVED_FACE_COLORS[face]] * SLOTS_PER_FACE for face in FACES}


def random_configuration(rng: Optional[random.Random] = None) -> Configuration:
    """
    Every slot independently uniform over the six colors.
    The result is fully colored but almost never a physically valid cube.
    """
    rng = rng or random.Random()
    return {face: [rng.choice(COLORS) for _ in range(SLOTS_PER_FACE)] for face in FACES}


def count_colored(configuration: Configuration) -> int:
    """Number of non-empty slots across all faces (missing faces count as empty)."""
    return sum(1 for face in FACES for color in configuration.get(face, []) if color)


def is_valid(configuration: Configuration) -> bool:
    """
    Standalone sanity check for a painted cube. Not used as a gate on solving.

    False if any face does not have exactly 9 slots or has an empty slot,
    otherwise True only when every color that appears, appears exactly 9 times.
    """
    for face in FACES:
        slots = configuration.get(face)
        if slots is None or len(slots) != SLOTS_PER_FACE:
            return False
        if any(not color for color in slots):
            return False

    counts = Counter(color for face in FACES for color in configuration[face])
    return all(count == SLOTS_PER_FACE for count in counts.values())


def _check_face(face):
    if face not in FACES:
        raise ValueError(f"Unknown face '{face}'. Allowed faces: {', '.join(FACES)}.")


class FaceInput:
    """
    Face-by-face painting state.

    The cursor walks FACES in order. Moving forward is only possible once the
    face under the cursor is fully colored; on the last face a forward move
    reports that the whole cube is ready to solve instead of moving.
    """

    def __init__(self, configuration: Optional[Configuration] = None):
        self.cursor = 0
        self.configuration = empty_configuration()
        if configuration is not None:
            self.load(configuration)

    @property
    def current_face(self) -> str:
        return FACES[self.cursor]

    @property
    def is_last_face(self) -> bool:
        return self.cursor == len(FACES) - 1

    def paint(self, face: str, index: int, color: Optional[Color]):
        """Set one slot. Painting is allowed on any face; None clears the slot."""
        _check_face(face)
        if not 0 <= index < SLOTS_PER_FACE:
            raise ValueError(f"Slot index {index} out of range 0-{SLOTS_PER_FACE - 1}.")
        if color is not None and not isinstance(color, Color):
            raise ValueError(f"Unknown color '{color}'. Allowed colors: {[c.value for c in COLORS]}.")
        self.configuration[face][index] = color

    def is_face_complete(self, face: str) -> bool:
        _check_face(face)
        return all(color is not None for color in self.configuration[face])

    def is_all_complete(self) -> bool:
        return all(self.is_face_complete(face) for face in FACES)

    def progress(self) -> Dict[str, bool]:
        return {face: self.is_face_complete(face) for face in FACES}

    def can_advance(self) -> bool:
        if self.is_last_face:
            return self.is_all_complete()
        return self.is_face_complete(self.current_face)

    def advance(self, direction: int) -> bool:
        """
        Move the cursor by one face.
        Returns True only when a forward move on the last face finds the
        whole cube colored; every other call returns False.
        """
        if direction not in (-1, 1):
            raise ValueError(f"Direction must be -1 or 1, got {direction}.")

        if direction == -1:
            if self.cursor > 0:
                self.cursor -= 1
            return False

        if not self.can_advance():
            return False
        if self.is_last_face:
            return True
        self.cursor += 1
        return False

    def load(self, configuration: Configuration):
        """Replace all slots (e.g. with a random cube). The cursor stays where it is."""
        loaded = {}
        for face in FACES:
            slots = list(configuration.get(face, []))
            if len(slots) != SLOTS_PER_FACE:
                raise ValueError(f"Face '{face}' has {len(slots)} slots, expected {SLOTS_PER_FACE}.")
            loaded[face] = [Color(c) if c else None for c in slots]
        self.configuration = loaded

    def reset(self):
        self.cursor = 0
        self.configuration = empty_configuration()
