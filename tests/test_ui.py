from jolly.ui import Layout, UiComponent, UiContext, UiDefaults
from jolly.vec import Vec2, Vec3, Vec4


def test_button_not_pressed_by_default():
    ui = UiContext()
    assert ui.button("press me!") is False
    assert ui.elements == ["press me!"]


def test_button_reports_press():
    ui = UiContext(pressed={"ok"})
    assert ui.button("ok") is True
    assert ui.button("cancel") is False


def test_layout_selection():
    ui = UiContext()
    ui.grid()
    assert ui.layout is Layout.GRID
    ui.justify()
    assert ui.layout is Layout.JUSTIFY


def test_component_render_function_runs_against_context():
    def render(ui, ms):
        ui.button("b")

    component = UiComponent(Vec2(0, 0), Vec2(1, 1), Vec3(0.2, 0.8, 0.2), render)
    ui = UiContext()
    component.fn(ui, 16.0)
    assert ui.elements == ["b"]
    assert component.color == Vec3(0.2, 0.8, 0.2)


def test_defaults_are_independent():
    a = UiDefaults()
    b = UiDefaults(text_font="mono")
    a.background.x = 1
    assert b.background == Vec4()
    assert b.text_font == "mono"