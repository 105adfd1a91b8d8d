import random

import pytest

from cube import (
    COLORS,
    FACES,
    Color,
    FaceInput,
    count_colored,
    empty_configuration,
    is_valid,
    random_configuration,
    solved_configuration,
)


def fill_face(face_input, face, color=Color.WHITE):
    for i in range(9):
        face_input.paint(face, i, color)


def test_initial_state():
    fi = FaceInput()
    assert fi.cursor == 0
    assert fi.current_face == "front"
    assert count_colored(fi.configuration) == 0
    assert not any(fi.progress().values())


def test_face_complete_only_when_all_nine_painted():
    fi = FaceInput()
    for i in range(8):
        fi.paint("front", i, Color.RED)
        assert not fi.is_face_complete("front")
    fi.paint("front", 8, Color.RED)
    assert fi.is_face_complete("front")


def test_face_completion_not_affected_by_other_faces():
    fi = FaceInput()
    fill_face(fi, "front")
    for face in FACES[1:]:
        fill_face(fi, face, Color.BLUE)
        fi.paint(face, 4, None)
        assert fi.is_face_complete("front")


def test_clearing_a_slot_makes_face_incomplete():
    fi = FaceInput()
    fill_face(fi, "top")
    fi.paint("top", 3, None)
    assert not fi.is_face_complete("top")


def test_paint_is_allowed_on_any_face():
    fi = FaceInput()
    fi.paint("bottom", 0, Color.GREEN)
    assert fi.configuration["bottom"][0] is Color.GREEN
    assert fi.cursor == 0


@pytest.mark.parametrize("face,index,color", [
    ("middle", 0, Color.RED),
    ("front", 9, Color.RED),
    ("front", -1, Color.RED),
    ("front", 0, "purple"),
])
def test_paint_rejects_bad_arguments(face, index, color):
    with pytest.raises(ValueError):
        FaceInput().paint(face, index, color)


def test_advance_forward_is_noop_on_incomplete_face():
    fi = FaceInput()
    fi.paint("front", 0, Color.RED)
    assert fi.advance(1) is False
    assert fi.cursor == 0


def test_advance_forward_increments_by_one_when_complete():
    fi = FaceInput()
    fill_face(fi, "front")
    assert fi.advance(1) is False
    assert fi.cursor == 1
    assert fi.current_face == "right"


def test_advance_backward_floors_at_zero():
    fi = FaceInput()
    fi.advance(-1)
    assert fi.cursor == 0
    fill_face(fi, "front")
    fi.advance(1)
    fi.advance(-1)
    assert fi.cursor == 0


def test_advance_backward_does_not_need_complete_face():
    fi = FaceInput()
    fill_face(fi, "front")
    fi.advance(1)
    fi.paint("right", 0, Color.RED)
    fi.advance(-1)
    assert fi.cursor == 0


def test_advance_rejects_other_directions():
    with pytest.raises(ValueError):
        FaceInput().advance(2)


def test_last_face_signals_ready_only_when_all_complete():
    fi = FaceInput()
    for face in FACES:
        fill_face(fi, face)
        fi.advance(1)
    assert fi.is_last_face
    assert fi.cursor == len(FACES) - 1

    fi.paint("back", 2, None)
    assert fi.advance(1) is False
    assert fi.cursor == len(FACES) - 1

    fi.paint("back", 2, Color.WHITE)
    assert fi.advance(1) is True
    assert fi.cursor == len(FACES) - 1


def test_last_face_complete_but_earlier_face_painted_out():
    fi = FaceInput()
    fi.cursor = len(FACES) - 1
    fill_face(fi, "bottom")
    assert fi.is_face_complete("bottom")
    assert fi.can_advance() is False
    assert fi.advance(1) is False


def test_load_and_reset(rng):
    fi = FaceInput()
    fill_face(fi, "front")
    fi.advance(1)
    fi.load(random_configuration(rng))
    assert fi.cursor == 1
    assert fi.is_all_complete()

    fi.reset()
    assert fi.cursor == 0
    assert fi.configuration == empty_configuration()


def test_load_accepts_plain_strings_and_empty_slots():
    config = {face: ["red"] * 8 + [""] for face in FACES}
    fi = FaceInput(config)
    assert fi.configuration["left"][0] is Color.RED
    assert fi.configuration["left"][8] is None
    assert not fi.is_face_complete("left")


def test_load_rejects_short_face():
    config = empty_configuration()
    config["top"] = [None] * 8
    with pytest.raises(ValueError):
        FaceInput().load(config)


def test_is_valid_with_nine_of_each_color(full_valid_configuration):
    assert is_valid(full_valid_configuration)


def test_is_valid_false_with_one_empty_slot(full_valid_configuration):
    full_valid_configuration["left"][5] = None
    assert count_colored(full_valid_configuration) == 53
    assert not is_valid(full_valid_configuration)


def test_is_valid_false_with_ten_and_eight(full_valid_configuration):
    # front is white, right is yellow: 10 white, 8 yellow
    full_valid_configuration["right"] = [Color.WHITE] + [Color.YELLOW] * 8
    assert not is_valid(full_valid_configuration)


def test_is_valid_false_when_all_white():
    config = {face: [Color.WHITE] * 9 for face in FACES}
    assert not is_valid(config)


def test_is_valid_false_with_wrong_slot_count(full_valid_configuration):
    full_valid_configuration["top"] = full_valid_configuration["top"] + [Color.RED]
    assert not is_valid(full_valid_configuration)


def test_solved_configuration_is_valid():
    solved = solved_configuration()
    assert is_valid(solved)
    assert solved["front"] == [Color.GREEN] * 9
    assert solved["bottom"] == [Color.WHITE] * 9


def test_random_configuration_fills_all_slots():
    config = random_configuration(random.Random(7))
    assert set(config) == set(FACES)
    assert count_colored(config) == 54
    assert all(c in COLORS for face in FACES for c in config[face])


def test_random_configuration_reproducible_with_seed():
    assert random_configuration(random.Random(3)) == random_configuration(random.Random(3))


def test_failed_load_leaves_configuration_untouched():
    fi = FaceInput()
    fill_face(fi, "front", Color.RED)
    before = {face: list(slots) for face, slots in fi.configuration.items()}

    config = {face: ["blue"] * 9 for face in FACES}
    config["left"] = ["blue"] * 8
    with pytest.raises(ValueError):
        fi.load(config)
    assert fi.configuration == before
