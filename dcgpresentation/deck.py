import dearcygui as dcg
import logging

from dataclasses import dataclass
from typing import Any, Callable

from .events import Action, KeyEvent

logger = logging.getLogger(__name__)

SIGNATURE_HINT = "Failed to add slide - maybe the function signature does not match draw(canvas)?"


@dataclass
class Slide:
    """A registered drawing function and its clear policy.

    A slide with `clear` set is a clear point: the canvas is emptied before
    it is drawn. A slide without it is drawn on top of the previous slide.
    """
    draw: Callable[[Any], Any]
    clear: bool = True
    title: str = ""


class SlideDeck:
    """
    Ordered slides and a cursor into them, drawing into a reusable canvas.

    The canvas only needs a `clear()` method, support for indexing, and
    to be usable as a context manager (entered while a slide draws).
    `Presentation` provides a DearCyGui one.

    The content of the canvas is always what running the slides from the
    nearest clear point up to the current one produces. The first slide is
    always a clear point.

    `idx` is -1 while the deck is empty.
    """

    def __init__(self, fig):
        self.fig = fig
        self.idx: int = -1
        self.slides: list[Slide] = []

    def __len__(self):
        return len(self.slides)

    def __getitem__(self, idx):
        return self.fig[idx]

    def clear(self):
        """Clear the slide canvas"""
        self.fig.clear()

    @property
    def current_slide(self) -> Slide | None:
        if 0 <= self.idx < len(self.slides):
            return self.slides[self.idx]
        return None

    def _on_slide_changed(self):
        """Called after the current index changed"""
        pass

    def _draw(self, slide: Slide):
        with self.fig:
            slide.draw(self.fig)

    def validate_slide(self, draw: Callable[[Any], Any], clear: bool = True):
        """Draw `draw` into the canvas once, clearing first if `clear`.

        Errors are logged and re-raised after the canvas is redrawn to the
        current slide. The slide list is not modified.
        """
        try:
            if clear:
                self.fig.clear()
            with self.fig:
                draw(self.fig)
        except Exception:
            logger.exception(SIGNATURE_HINT)
            # put back what the current slide shows
            if self.current_slide is not None:
                self._replay(self.idx)
            else:
                self.fig.clear()
            raise

    def add_slide(self, draw: Callable[[Any], Any], clear: bool = True, title: str = ""):
        """Append a slide at the end and switch to it.

        The slide is drawn immediately, so that errors show up while
        building the presentation instead of while presenting it.
        """
        # always clear first slide
        clear = clear or len(self.slides) == 0
        # A slide that builds on the previous one needs the canvas
        # to hold the last slide.
        if not clear and self.idx != len(self.slides) - 1:
            self.set_slide_idx(len(self.slides) - 1)
        self.validate_slide(draw, clear)
        self.slides.append(Slide(draw, clear, title))
        self.idx = len(self.slides) - 1
        logger.debug("Added slide %d (clear=%s)", self.idx, self.slides[-1].clear)
        self._on_slide_changed()

    def slide(self, clear: bool = True, title: str = ""):
        """Decorator form of `add_slide`.

            @pres.slide(title="Intro")
            def intro(canvas):
                ...
        """
        def decorator(draw):
            self.add_slide(draw, clear=clear, title=title)
            return draw
        return decorator

    def _set_slide_idx(self, i: int) -> bool:
        """Move one step: clear only if slide `i` is a clear point."""
        if i == self.idx or not 0 <= i < len(self.slides):
            return False
        self.idx = i
        slide = self.slides[i]
        if slide.clear:
            self.fig.clear()
        self._draw(slide)
        logger.debug("Switched to slide %d", i)
        self._on_slide_changed()
        return True

    def _replay(self, i: int) -> int:
        """Clear, then redraw slides from the clear point of `i` through `i`.

        Returns the index replay started from.
        """
        start = i
        while start > 0 and not self.slides[start].clear:
            start -= 1
        self.fig.clear()
        for j in range(start, i + 1):
            self._draw(self.slides[j])
        return start

    def set_slide_idx(self, i: int):
        """Show slide `i`, replaying from the nearest clear point before it."""
        if i == self.idx or not 0 <= i < len(self.slides):
            return
        if self.slides[i].clear:
            self._set_slide_idx(i)
            return
        start = self._replay(i)
        self.idx = i
        logger.debug("Switched to slide %d (replayed from %d)", i, start)
        self._on_slide_changed()

    def next_slide(self):
        """Advance to the next slide"""
        self._set_slide_idx(self.idx + 1)

    def previous_slide(self):
        """Go back to the previous slide"""
        self.set_slide_idx(self.idx - 1)

    def reset(self):
        """Go back to the first slide"""
        self.set_slide_idx(0)

    def on_keyboard(self, event: KeyEvent) -> bool:
        """Navigation bindings. Never consumes the event."""
        if event.action == Action.RELEASE:
            if event.key in (dcg.Key.RIGHTARROW, dcg.Key.ENTER):
                self.next_slide()
            elif event.key == dcg.Key.LEFTARROW:
                self.previous_slide()
            elif event.key == dcg.Key.HOME:
                self.reset()
        return False
