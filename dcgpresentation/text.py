import dearcygui as dcg

from typing import overload

from .context import get_context

# Filler text for trying out layouts
lorem_ipsum = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim "
    "veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea "
    "commodo consequat. Duis aute irure dolor in reprehenderit in voluptate "
    "velit esse cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat "
    "cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id "
    "est laborum."
)


def _applicable_context(*args, **kwargs) -> dcg.Context:
    """The context passed first or as `context=`, else the one of the current slide"""
    if len(args) >= 1 and isinstance(args[0], dcg.Context):
        return args[0]
    if 'context' in kwargs:
        return kwargs['context']
    return get_context()


def _parse_text_args(*args, **kwargs):
    """Handle argument parsing for:

    Text(context, text, ...)
    Text(text, ...)
    Text(..., text=..., context=C, ...)
    Text(context, ..., text=...)
    """
    context = _applicable_context(*args, **kwargs)
    kwargs.pop('context', None)
    if len(args) == 2:
        if not isinstance(args[0], dcg.Context):
            raise TypeError(f"Expected (context, text, ...) or (text, ...), got ({type(args[0]).__name__}, {type(args[1]).__name__})")
        return context, args[1], kwargs
    elif len(args) == 1:
        if not isinstance(args[0], dcg.Context):
            return context, args[0], kwargs
    elif len(args) > 2:
        raise TypeError("Received too many positional arguments")
    if 'text' in kwargs:
        return context, kwargs.pop('text'), kwargs
    raise TypeError("Missing required argument: 'text'")


class Text(dcg.MarkDownText):
    """Markdown text.

    Inside a slide the context can be omitted:

        @pres.slide()
        def intro(canvas):
            Text("# Hello")
    """
    @overload
    def __init__(self, context: dcg.Context, text: str, **kwargs): ...

    @overload
    def __init__(self, text: str, **kwargs): ...

    def __init__(self, *args, **kwargs):
        context, text, kwargs = _parse_text_args(*args, **kwargs)
        super().__init__(context, value=text, **kwargs)

    def __new__(cls, *args, **kwargs):
        return super().__new__(cls, _applicable_context(*args, **kwargs))
