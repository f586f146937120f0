import dearcygui as dcg
import pytest

from dcgpresentation import Action, KeyEvent, MouseButtonEvent, Presentation, SlideCanvas, Text


def text_slide(value):
    def draw(canvas):
        dcg.Text(canvas.context, value=value)
    return draw


def texts(pres):
    return [child.value for child in pres.fig.children]


def release(key):
    return KeyEvent(key, Action.RELEASE)


@pytest.fixture
def pres(C):
    return Presentation(C, title="Test")


def test_construction(pres, C):
    assert isinstance(pres.fig, SlideCanvas)
    assert pres.fig.parent is pres.parent
    assert pres.context is C
    assert pres.idx == -1
    assert len(pres) == 0
    assert pres.fig.children == []


def test_slides_draw_into_canvas(pres):
    pres.add_slide(text_slide("a"), title="First")
    assert texts(pres) == ["a"]
    assert pres[0].value == "a"
    pres.add_slide(text_slide("b"), clear=False)
    assert texts(pres) == ["a", "b"]
    pres.add_slide(text_slide("c"))
    assert texts(pres) == ["c"]
    assert pres._slide_counter.value == "Slide: 3/3"


def test_header_follows_navigation(pres):
    pres.add_slide(text_slide("a"), title="First")
    pres.add_slide(text_slide("b"), title="Second")
    pres.reset()
    assert pres._slide_counter.value == "Slide: 1/2"
    assert pres._slide_title.value == "First"
    assert pres._progress_bar.overlay == "1/2"
    pres.next_slide()
    assert pres._slide_title.value == "Second"
    assert pres._progress_bar.value == pytest.approx(1.)


def test_replay_through_canvas(pres):
    for name, clear in zip("abcde", [True, False, False, True, False]):
        pres.add_slide(text_slide(name), clear=clear)
    assert texts(pres) == ["d", "e"]
    pres.set_slide_idx(2)
    assert texts(pres) == ["a", "b", "c"]
    pres.set_slide_idx(4)
    assert texts(pres) == ["d", "e"]


def test_failing_slide_keeps_slide_list(pres):
    pres.add_slide(text_slide("a"))

    def broken(canvas):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        pres.add_slide(broken)
    assert len(pres) == 1
    assert pres.idx == 0
    assert texts(pres) == ["a"]


def test_clear_keeps_background(pres):
    pres.add_slide(text_slide("a"))
    background = list(pres.parent.children)
    pres.clear()
    assert pres.fig.children == []
    assert list(pres.parent.children) == background
    assert len(pres) == 1


def test_keyboard_navigation(pres):
    for name in "abc":
        pres.add_slide(text_slide(name))
    pres.reset()
    pres.events.keyboardbutton.notify(release(dcg.Key.RIGHTARROW))
    assert pres.idx == 1
    assert texts(pres) == ["b"]
    pres.events.keyboardbutton.notify(release(dcg.Key.ENTER))
    pres.events.keyboardbutton.notify(release(dcg.Key.RIGHTARROW))
    assert pres.idx == 2
    pres.events.keyboardbutton.notify(release(dcg.Key.LEFTARROW))
    assert pres.idx == 1
    pres.events.keyboardbutton.notify(release(dcg.Key.HOME))
    assert pres.idx == 0


def test_escape_ends_presentation(pres, C):
    pres.events.keyboardbutton.notify(release(dcg.Key.ESCAPE))
    assert not C.running


def test_slide_listeners_are_dropped_with_the_slide(pres):
    seen = []

    def interactive(canvas):
        dcg.Text(canvas.context, value="interactive")
        canvas.events.keyboardbutton.on(seen.append)
        canvas.events.mousebutton.on(seen.append)

    pres.add_slide(interactive)
    pres.add_slide(text_slide("plain"))
    pres.reset()
    assert len(pres.fig.events.keyboardbutton) == 1

    click = MouseButtonEvent(dcg.MouseButton.LEFT, Action.PRESS)
    pres.events.mousebutton.notify(click)
    assert seen == [click]

    # slide listeners see the key before navigation moves away
    pres.events.keyboardbutton.notify(release(dcg.Key.RIGHTARROW))
    assert seen == [click, release(dcg.Key.RIGHTARROW)]
    assert pres.idx == 1
    assert len(pres.fig.events.keyboardbutton) == 0

    pres.events.keyboardbutton.notify(release(dcg.Key.LEFTARROW))
    assert pres.idx == 0
    assert len(seen) == 2


def test_navigation_priority(C):
    pres = Presentation(C, navigation_priority=200)
    pres.add_slide(text_slide("a"))
    pres.add_slide(text_slide("b"))
    pres.reset()
    seen = []
    pres.fig.events.keyboardbutton.on(lambda event: seen.append(pres.idx))
    pres.events.keyboardbutton.notify(release(dcg.Key.RIGHTARROW))
    # navigation ran first, clearing the listener before forwarding
    assert pres.idx == 1
    assert seen == []


def test_bridged_handlers_are_attached(pres):
    assert len(pres.parent.handlers) > 0


def test_padding(C):
    pres = Presentation(C, padding=(30, 5))
    assert pres.padding == (30, 5)
    assert pres.parent.theme is not None
    pres.padding = [12, 8]
    assert pres.padding == (12, 8)


def test_window_keywords_are_forwarded(C):
    pres = Presentation(C, title="Ignored", label="Kept", no_collapse=False)
    assert pres.parent.label == "Kept"
    assert not pres.parent.no_collapse


def test_text_inside_a_slide(pres):
    pres.add_slide(lambda canvas: Text("# Hello"))
    assert isinstance(pres[0], Text)
    assert pres[0].parent is pres.fig
