import pytest

from rakusite.app import App
from rakusite.cli import INTRO_HINT, INTRO_LINES, Scene, State, main, render_frame, render_intro


@pytest.mark.parametrize(
    "action",
    ["on_down", "on_up", "on_right", "on_left", "on_enter", "open_link"],
)
def test_any_action_leaves_intro_without_touching_menu(action):
    state = State()
    assert state.scene is Scene.INTRO
    getattr(state, action)()
    assert state.scene is Scene.LIST
    assert state.app.selected_index is None


def test_key_leaves_intro_then_drives_menu():
    state = State()
    state.on_key("q")
    assert state.scene is Scene.LIST
    assert state.app.should_exit is False
    state.on_key("e")
    assert state.app.selected_index == len(state.app.items) - 1


def test_list_scene_delegates_to_app():
    state = State()
    state.on_down()
    state.on_down()
    assert state.app.selected_index == 0
    state.on_right()
    assert state.app.items[0].status.symbol() in state.app.items[0].label()
    state.on_left()
    assert state.app.selected_index is None


def test_escape_returns_to_intro():
    state = State()
    state.on_enter()
    state.on_escape()
    assert state.scene is Scene.INTRO


def test_open_link_in_list_returns_url():
    opened = []
    state = State(App(opener=opened.append))
    state.on_enter()
    state.app.select_last()
    url = state.open_link()
    assert url == state.app.items[-1].topic.link()
    assert opened == [url]


def test_render_intro_dimensions_and_text():
    lines = render_intro(80, 24)
    assert len(lines) == 24
    assert all(len(line) == 80 for line in lines)
    text = "\n".join(lines)
    for expected in INTRO_LINES + INTRO_HINT:
        assert expected in text


def test_render_intro_narrow_keeps_width():
    lines = render_intro(20, 10)
    assert all(len(line) == 20 for line in lines)


def test_render_frame_follows_scene():
    state = State()
    assert render_frame(state, 60, 20) == render_intro(60, 20)
    state.on_down()
    assert render_frame(state, 60, 20) == state.app.render(60, 20)


def test_main_print_list(capsys):
    assert main(["--print", "--scene", "list", "--width", "70", "--height", "20"]) == 0
    out = capsys.readouterr().out
    assert "Topics" in out
    assert len(out.rstrip("\n").split("\n")) == 20


def test_main_print_intro(capsys):
    assert main(["--print"]) == 0
    assert INTRO_HINT[0] in capsys.readouterr().out