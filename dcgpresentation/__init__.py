from .context import get_context, pop_context, push_context
from .deck import Slide, SlideDeck
from .events import Action, Events, EventStream, KeyEvent, MouseButtonEvent
from .export import export_presentation, unique_filename
from .presentation import Presentation, SlideCanvas
from .text import Text, lorem_ipsum

__all__ = [
    "Action",
    "Events",
    "EventStream",
    "KeyEvent",
    "MouseButtonEvent",
    "Presentation",
    "Slide",
    "SlideCanvas",
    "SlideDeck",
    "Text",
    "export_presentation",
    "get_context",
    "lorem_ipsum",
    "pop_context",
    "push_context",
    "unique_filename",
]
