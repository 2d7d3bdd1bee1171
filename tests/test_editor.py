"""Tests for the editor model - drop, hit-testing, drag, resize and rotate."""

import itertools

import pytest

from floorplan import EditorModel, ElementType, Interaction, PlacedElement


def make_model(start: int = 1_700_000_000_000) -> EditorModel:
    """Model with a frozen clock so ids are predictable."""
    return EditorModel(clock=lambda: start)


def place(model: EditorModel, el_id: int, x: float, y: float, w: float = 50, h: float = 50,
          kind: str = ElementType.TABLE) -> PlacedElement:
    el = PlacedElement(id=el_id, type=kind, x=x, y=y, width=w, height=h, rotation=0)
    model.elements.append(el)
    return el


@pytest.mark.parametrize("kind", ElementType.ALL)
@pytest.mark.parametrize("dx,dy", [(100, 100), (0, 0), (799.5, 12.25)])
def test_drop_centers_default_element(kind, dx, dy):
    model = make_model()
    el = model.drop(kind, dx, dy)

    assert (el.x, el.y) == (dx - 25, dy - 25)
    assert (el.width, el.height) == (50, 50)
    assert el.rotation == 0
    assert el.type == kind
    assert model.elements == [el]


def test_drop_ids_unique_with_frozen_clock():
    model = make_model()
    ids = [model.drop(ElementType.CHAIR, 10 * i, 10).id for i in range(5)]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)


def test_drop_uses_clock_when_ahead():
    ticks = itertools.count(1000, 500)
    model = EditorModel(clock=lambda: next(ticks))
    assert model.drop(ElementType.DOOR, 0, 0).id == 1000
    assert model.drop(ElementType.DOOR, 0, 0).id == 1500


def test_drop_does_not_change_selection():
    model = make_model()
    first = model.drop(ElementType.TABLE, 100, 100)
    model.pointer_down(100, 100)
    model.pointer_up()
    assert model.selected_id == first.id

    model.drop(ElementType.CHAIR, 300, 300)
    assert model.selected_id == first.id


def test_drop_unknown_type_rejected():
    model = make_model()
    with pytest.raises(ValueError):
        model.drop("Sofa", 10, 10)
    assert model.elements == []


def test_hit_test_first_match_wins():
    model = make_model()
    place(model, 1, 0, 0, 100, 100)
    place(model, 2, 50, 50, 100, 100)

    assert model.hit_test(75, 75).id == 1
    assert model.hit_test(125, 125).id == 2
    assert model.hit_test(500, 500) is None


def test_hit_test_excludes_edges():
    model = make_model()
    place(model, 1, 10, 10, 50, 50)
    assert model.hit_test(10, 30) is None
    assert model.hit_test(60, 30) is None
    assert model.hit_test(30, 60) is None
    assert model.hit_test(11, 11).id == 1


def test_hit_test_ignores_rotation():
    model = make_model()
    el = place(model, 1, 0, 0, 100, 20)
    el.rotation = 90
    # rotated visual would cover (50, 50); the hit box does not
    assert model.hit_test(50, 50) is None
    assert model.hit_test(90, 10).id == 1


def test_pointer_down_on_empty_space_clears_selection():
    model = make_model()
    place(model, 1, 0, 0)
    model.pointer_down(20, 20)
    model.pointer_up()
    assert model.selected_id == 1

    model.pointer_down(400, 400)
    assert model.selected_id is None
    assert model.interaction == Interaction.IDLE


def test_drag_moves_by_pointer_offset_without_clamping():
    model = make_model()
    el = place(model, 1, 100, 100)
    model.pointer_down(110, 120)
    assert model.interaction == Interaction.DRAGGING

    model.pointer_move(30, 40)
    assert (el.x, el.y) == (20, 20)

    model.pointer_move(-500, -500)
    assert (el.x, el.y) == (-510, -520)

    model.pointer_up()
    assert model.interaction == Interaction.IDLE
    model.pointer_move(0, 0)
    assert (el.x, el.y) == (-510, -520)


def test_pointer_move_when_idle_is_noop():
    model = make_model()
    el = place(model, 1, 100, 100)
    model.pointer_move(5, 5)
    assert (el.x, el.y) == (100, 100)


def test_handle_takes_precedence_over_elements():
    model = make_model()
    selected = place(model, 1, 200, 200, 50, 50)
    # earlier in the list and covering the handle of the selected element
    cover = PlacedElement(id=2, type=ElementType.TABLE, x=240, y=240, width=50, height=50)
    model.elements.insert(0, cover)

    model.selected_id = selected.id
    model.pointer_down(250, 250)
    assert model.interaction == Interaction.RESIZING
    assert model.selected_id == selected.id


def test_handle_only_for_selected_element():
    model = make_model()
    place(model, 1, 0, 0)
    # corner of an unselected element is on its edge: no hit at all
    model.pointer_down(50, 50)
    assert model.interaction == Interaction.IDLE
    assert model.selected_id is None


def test_resize_from_handle():
    model = make_model()
    el = place(model, 1, 0, 0)
    model.pointer_down(25, 25)
    model.pointer_up()

    model.pointer_down(52, 48)
    assert model.interaction == Interaction.RESIZING
    model.pointer_move(82, 58)
    assert (el.width, el.height) == (80, 60)
    assert (el.x, el.y) == (0, 0)


@pytest.mark.parametrize("delta", [(-40, -40), (-1000, -1000), (-45, 500), (1e6, -1e6)])
def test_resize_never_below_minimum(delta):
    model = make_model()
    el = place(model, 1, 0, 0)
    model.selected_id = 1
    model.pointer_down(50, 50)
    model.pointer_move(50 + delta[0], 50 + delta[1])
    assert el.width >= 10
    assert el.height >= 10


def test_rotate_wraps_after_eight_steps():
    model = make_model()
    el = place(model, 1, 0, 0)
    model.selected_id = 1
    seen = []
    for _ in range(8):
        assert model.rotate_selected()
        seen.append(el.rotation)
    assert seen == [45, 90, 135, 180, 225, 270, 315, 0]


def test_rotate_without_selection_is_noop():
    model = make_model()
    el = place(model, 1, 0, 0)
    assert not model.can_rotate
    assert not model.rotate_selected()
    assert el.rotation == 0


def test_replace_elements_keeps_surviving_selection():
    model = make_model()
    place(model, 1, 0, 0)
    model.selected_id = 1
    model.replace_elements([PlacedElement(id=1, type=ElementType.DOOR, x=5, y=5)])
    assert model.selected_id == 1
    assert model.selected.type == ElementType.DOOR


def test_replace_elements_drops_stale_selection():
    model = make_model()
    place(model, 1, 0, 0)
    model.selected_id = 1
    model.replace_elements([])
    assert model.selected_id is None
    assert model.elements == []


def test_on_change_fires_for_mutations():
    calls = []
    model = EditorModel(on_change=lambda: calls.append(1), clock=lambda: 1)
    model.drop(ElementType.TABLE, 100, 100)
    model.pointer_down(100, 100)
    model.pointer_move(110, 110)
    model.pointer_up()
    model.rotate_selected()
    model.replace_elements([])
    # drop, select, move, rotate, replace
    assert len(calls) == 5


def test_chair_scenario():
    model = make_model()
    chair = model.drop(ElementType.CHAIR, 100, 100)
    assert chair.to_dict() == {
        "id": chair.id, "type": "Chair",
        "x": 75, "y": 75, "width": 50, "height": 50, "rotation": 0,
    }

    model.pointer_down(100, 100)
    model.pointer_move(120, 90)
    model.pointer_up()
    assert (chair.x, chair.y) == (95, 65)

    model.rotate_selected()
    assert chair.rotation == 45
