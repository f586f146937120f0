import dearcygui as dcg
import logging

from . import Action, Presentation, Text, lorem_ipsum


def build_slides(pres: Presentation):
    C = pres.context

    @pres.slide(title="dcgpresentation")
    def title(canvas):
        Text("# dcgpresentation")
        Text("## Slides drawn with DearCyGui")
        Text("*Right arrow or Enter to advance, Left arrow to go back, Home to restart*")

    @pres.slide(title="Incremental slides")
    def build_up(canvas):
        Text("Slides added with `clear=False` build on the previous one:")

    @pres.slide(clear=False, title="Incremental slides")
    def first_point(canvas):
        Text("- first point")

    @pres.slide(clear=False, title="Incremental slides")
    def second_point(canvas):
        Text("- second point")

    @pres.slide(title="Slide-local handlers")
    def counter(canvas):
        Text("Press space: listeners attached here disappear with the slide.")
        label = dcg.Text(C, value="0 presses")
        presses = [0]
        def on_key(event):
            if event.key == dcg.Key.SPACE and event.action == Action.RELEASE:
                presses[0] += 1
                label.value = f"{presses[0]} presses"
            return False
        canvas.events.keyboardbutton.on(on_key)

    @pres.slide(title="Lorem ipsum")
    def filler(canvas):
        Text(lorem_ipsum)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    C = dcg.Context()
    pres = Presentation(C, title="dcgpresentation demo")
    pres.parent.scaling_factor = 1.6
    build_slides(pres)
    pres.run(title="dcgpresentation demo")
