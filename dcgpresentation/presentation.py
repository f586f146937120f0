import dearcygui as dcg
import logging

from .context import push_context, pop_context
from .deck import SlideDeck
from .events import Action, Events, KeyEvent, bridge_handlers
from .export import export_presentation, unique_filename

logger = logging.getLogger(__name__)


class SlideCanvas(dcg.ChildWindow):
    """The mutable part of a presentation.

    Slides draw into it. Clearing it detaches every item created by the
    previous slides and drops the listeners they attached to `events`.

    While entered (`with canvas:`), items created without an explicit parent
    are attached to the canvas and the context is available to helpers
    such as `Text`.
    """
    def __init__(self, C: dcg.Context, **kwargs):
        kwargs.setdefault("width", dcg.Size.FILLX())
        kwargs.setdefault("height", dcg.Size.FILLY())
        self.events = Events()
        super().__init__(C,
                         border=False,
                         no_scrollbar=True,
                         no_scroll_with_mouse=True,
                         **kwargs)

    def __getitem__(self, idx):
        return self.children[idx]

    def clear(self):
        self.children = [] # detach the previous slide
        self.events.clear()

    def __enter__(self):
        """Push context onto stack when entering with statement"""
        push_context(self.context)
        return super().__enter__()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Pop context from stack when exiting with statement"""
        result = super().__exit__(exc_type, exc_val, exc_tb)
        pop_context()
        return result


class Presentation(SlideDeck):
    """
    A presentation made of two windows: `pres.parent` and `pres.fig`.

    The former remains static during the presentation and acts as the
    background and window. The latter acts as the slide and gets cleared and
    reassembled every time a new slide is requested (this includes the
    listeners attached to `pres.fig.events`).

    Args:
        C (dcg.Context): The DearCyGui context
        title (str): Title of the presentation window
        padding (tuple): Padding of the background window
        navigation_priority (int): Priority of the navigation keys on
            `pres.events.keyboardbutton`. Input reaches the slide canvas
            at priority 100.
        **kwargs: Additional arguments passed to dcg.Window

    Example:
        ```python
        C = dcg.Context()
        pres = Presentation(C, title="My Presentation")

        @pres.slide(title="Introduction")
        def intro(canvas):
            Text("# Welcome to my presentation!")

        @pres.slide(clear=False)
        def details(canvas):
            Text("Drawn below the introduction")

        pres.run()
        ```

    Note that adding a slide immediately switches to it and draws it, so
    that broken slides fail while building the presentation.

    Controls:
        - Right arrow, Enter: next slide
        - Left arrow: previous slide
        - Home: first slide
        - F: Toggle fullscreen
        - Esc: Exit presentation
    """

    def __init__(self,
                 C: dcg.Context,
                 title: str = "Presentation",
                 padding: tuple[float, float] = (10, 10),
                 navigation_priority: int = -1,
                 **kwargs):
        self.context = C
        self._displayed = False
        kwargs.setdefault("label", title)
        kwargs.setdefault("no_collapse", True)
        self.parent = dcg.Window(C, **kwargs)
        self.parent.primary = True
        self.parent.no_move = True
        self.parent.no_title_bar = True
        with dcg.ThemeList(C) as theme:
            self._style = dcg.ThemeStyleImGui(C)
        self.parent.theme = theme
        self.padding = padding

        self._setup_menubar()
        self._setup_progress_bar()
        super().__init__(SlideCanvas(C, parent=self.parent))

        # Slide listeners are dropped with the slide, navigation
        # listeners live on the static background.
        self.events = Events()
        self.events.forward_to(self.fig.events, priority=100)
        self.events.keyboardbutton.on(self.on_keyboard, priority=navigation_priority)
        self.parent.handlers += bridge_handlers(C, self.events)

    def _setup_menubar(self):
        """Setup the top menubar with navigation controls"""
        with dcg.MenuBar(self.context, parent=self.parent):
            dcg.Button(self.context, arrow=dcg.ButtonDirection.LEFT,
                       callback=self.previous_slide)
            dcg.Button(self.context, arrow=dcg.ButtonDirection.RIGHT,
                       callback=self.next_slide)
            dcg.Spacer(self.context, label="|")
            dcg.Button(self.context, label="F", callback=self.toggle_fullscreen,
                       small=True, width=40)
            dcg.Spacer(self.context, label="|")
            self._slide_counter = dcg.Text(self.context, value="0/0")
            dcg.Spacer(self.context, width=20)
            self._slide_title = dcg.Text(self.context, value="")

    def _setup_progress_bar(self):
        """Create progress bar below the menubar"""
        with dcg.HorizontalLayout(self.context, parent=self.parent):
            self._progress_bar = dcg.ProgressBar(self.context,
                                                 value=0.0,
                                                 overlay="",
                                                 width=dcg.Size.FILLX(),
                                                 height=3)

    @property
    def padding(self) -> tuple[float, float]:
        """Padding of the background window"""
        return self._padding

    @padding.setter
    def padding(self, value):
        self._padding = tuple(value)
        self._style.window_padding = self._padding
        self._wake()

    def _wake(self):
        if self._displayed:
            self.context.viewport.wake()

    def _on_slide_changed(self):
        n = len(self.slides)
        self._slide_counter.value = f"Slide: {self.idx + 1}/{n}"
        slide = self.current_slide
        self._slide_title.value = slide.title if slide is not None else ""
        self._progress_bar.value = (self.idx + 1) / n if n > 0 else 0.
        self._progress_bar.overlay = f"{self.idx + 1}/{n}"
        self._wake()

    def on_keyboard(self, event: KeyEvent) -> bool:
        super().on_keyboard(event)
        if event.action == Action.RELEASE:
            if event.key == dcg.Key.ESCAPE:
                self.end()
            elif event.key == dcg.Key.F:
                self.toggle_fullscreen()
        return False

    def toggle_fullscreen(self):
        """Toggle fullscreen mode"""
        self.context.viewport.fullscreen = not self.context.viewport.fullscreen

    def end(self):
        """Stop the presentation loop"""
        self.context.running = False

    def display(self):
        """Show the background window, which contains the slide"""
        self.parent.show = True
        self._displayed = True
        self._wake()

    def start(self):
        """Show the first slide"""
        self.reset()
        self.display()

    def export(self, target: str | None = None) -> str:
        """Export every slide to a pdf file and return its path.

        Needs an initialized viewport and must run on its thread.
        """
        if target is None:
            target = unique_filename("slides", "pdf")
        export_presentation(target, self)
        return target

    def run(self, **kwargs):
        """Open the viewport and present until it is closed.

        Keyword arguments are passed to `C.viewport.initialize`.
        """
        kwargs.setdefault("title", self.parent.label)
        kwargs.setdefault("vsync", True)
        kwargs.setdefault("wait_for_input", True)
        C = self.context
        C.viewport.initialize(**kwargs)
        self.start()
        logger.info("Presenting %d slides", len(self.slides))
        while C.running:
            C.viewport.render_frame()
