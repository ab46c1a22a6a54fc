import pytest

from piston_sketch.core.commands import CommandStack, ParameterChange
from piston_sketch.core.controller import EngineController
from piston_sketch.core.interaction import HandleKind
from piston_sketch.core.mechanism import EngineParams


def test_parameter_change_restores_edits_but_not_crank_angle():
    live = EngineParams()
    before = live.copy()
    live.rod_length = 120.0
    live.cylinder_origin = (5.0, 5.0)
    stack = CommandStack()
    stack.push(ParameterChange(live, before, live, desc="Edit"), execute=False)

    live.crank_angle = 3.0
    stack.undo()
    assert live.rod_length == 70.0
    assert live.cylinder_origin == (0.0, 0.0)
    assert live.crank_angle == 3.0
    stack.redo()
    assert live.rod_length == 120.0
    assert live.cylinder_origin == (5.0, 5.0)


def test_command_stack_bookkeeping():
    calls = []
    stack = CommandStack(on_change=lambda: calls.append(1))
    live = EngineParams()
    assert not stack.can_undo()
    assert stack.undo_text() == ""
    after = live.copy()
    after.crank_radius = 10.0
    stack.push(ParameterChange(live, live, after, desc="Set crank radius"))
    assert live.crank_radius == 10.0
    assert stack.undo_text() == "Set crank radius"
    stack.undo()
    assert stack.can_redo()
    assert stack.redo_text() == "Set crank radius"
    stack.push(ParameterChange(live, live, after))
    assert not stack.can_redo()
    stack.clear()
    assert not stack.can_undo()
    assert len(calls) == 4


def test_tick_advances_crank_and_solves():
    ctrl = EngineController()
    first = ctrl.result
    ctrl.tick(0.016)
    assert ctrl.params.crank_angle == pytest.approx(0.05)
    assert ctrl.result.is_valid
    assert ctrl.result != first


def test_drag_in_display_coordinates_is_undoable():
    ctrl = EngineController()
    # default 800x600 view: world (0, 24) is display (400, 276)
    assert ctrl.mouse_press((400.0, 276.0)) is HandleKind.CYLINDER_DIRECTION
    assert ctrl.mouse_move((430.0, 260.0))
    assert ctrl.params.cylinder_direction == pytest.approx((30.0, 40.0))
    drag = ctrl.mouse_release()
    assert drag is not None and drag.changed
    assert ctrl.commands.can_undo()

    ctrl.undo()
    assert ctrl.params.cylinder_direction == pytest.approx((0.0, 20.0))
    ctrl.redo()
    assert ctrl.params.cylinder_direction == pytest.approx((30.0, 40.0))


def test_hover_reports_handle_without_capturing():
    ctrl = EngineController()
    assert not ctrl.mouse_move((400.0, 300.0))
    assert ctrl.hovered is HandleKind.CYLINDER_ORIGIN
    assert ctrl.capture.active is None


def test_hidden_guides_ignore_the_pointer():
    ctrl = EngineController()
    ctrl.set_show_cylinder_guides(False)
    assert ctrl.mouse_press((400.0, 300.0)) is None
    assert not ctrl.mouse_move((450.0, 300.0))
    assert ctrl.params.cylinder_origin == (0.0, 0.0)


def test_hiding_guides_mid_drag_releases_the_pointer():
    ctrl = EngineController()
    ctrl.mouse_press((400.0, 300.0))
    ctrl.mouse_move((410.0, 300.0))
    ctrl.set_show_cylinder_guides(False)
    assert ctrl.capture.active is None
    assert ctrl.commands.can_undo()


def test_set_value_records_undo_and_resolves():
    ctrl = EngineController()
    ctrl.set_value("rod_length", 10.0)
    assert not ctrl.result.is_valid
    ctrl.set_value("rod_length", 10.0)
    assert ctrl.commands.undo_text() == "Set rod length"
    ctrl.undo()
    assert not ctrl.commands.can_undo()
    assert ctrl.params.rod_length == 70.0
    assert ctrl.result.is_valid


def test_set_value_validates():
    ctrl = EngineController()
    with pytest.raises(ValueError):
        ctrl.set_value("rod_length", 0.0)
    with pytest.raises(ValueError):
        ctrl.set_value("crank_radius", -1.0)
    with pytest.raises(KeyError):
        ctrl.set_value("crank_angle", 1.0)


def test_piston_behind_origin_is_reported():
    ctrl = EngineController()
    ctrl.set_value("cylinder_origin", (0.0, 100.0))
    ctrl.params.crank_angle = -1.5707963267948966
    ctrl.solve()
    assert ctrl.piston_travel() == pytest.approx(-80.0)
    assert ctrl.piston_behind_origin()


def test_wheel_input_zooms_on_next_tick():
    ctrl = EngineController()
    ctrl.wheel(1.0)
    ctrl.tick(0.016)
    assert ctrl.camera.length_to_display(1.0) == pytest.approx(1.05)
    ctrl.reset_view()
    assert ctrl.camera.length_to_display(1.0) == pytest.approx(1.0)


def test_editing_one_coordinate_keeps_the_other_exact():
    ctrl = EngineController()
    ctrl.set_value("cylinder_direction", (30.123, 40.456))
    # panel spin boxes show two decimals; the untouched Y must not be rounded
    ctrl.set_component("cylinder_direction", 0, 31.0)
    assert ctrl.params.cylinder_direction == (31.0, 40.456)
    assert ctrl.commands.undo_text() == "Set cylinder direction"
    ctrl.undo()
    assert ctrl.params.cylinder_direction == (30.123, 40.456)

    ctrl.set_component("cylinder_origin", 1, -2.5)
    assert ctrl.params.cylinder_origin == (0.0, -2.5)
    with pytest.raises(KeyError):
        ctrl.set_component("rod_length", 0, 1.0)


def test_new_edit_after_undo_discards_redo_branch():
    ctrl = EngineController()
    ctrl.set_value("rod_length", 80.0)
    ctrl.set_value("rod_length", 90.0)
    ctrl.undo()
    ctrl.set_value("crank_radius", 40.0)
    assert not ctrl.commands.can_redo()
    assert len(ctrl.commands) == 2

    ctrl.undo()
    assert (ctrl.params.crank_radius, ctrl.params.rod_length) == (50.0, 80.0)
    ctrl.undo()
    assert ctrl.params.rod_length == 70.0
    assert not ctrl.commands.can_undo()
    ctrl.redo()
    ctrl.redo()
    assert (ctrl.params.crank_radius, ctrl.params.rod_length) == (40.0, 80.0)
    assert ctrl.commands.redo_text() == ""
