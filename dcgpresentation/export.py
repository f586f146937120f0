import imageio
import io
import logging
import numpy as np
import os
import time

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .presentation import Presentation

logger = logging.getLogger(__name__)


def unique_filename(base_name: str, ext: str) -> str:
    """Generate a unique filename by appending a number if file exists"""
    if not os.path.exists(f"{base_name}.{ext}"):
        return f"{base_name}.{ext}"
    counter = 1
    while os.path.exists(f"{base_name}_({counter}).{ext}"):
        counter += 1
    return f"{base_name}_({counter}).{ext}"


def _render_settled(presentation: 'Presentation'):
    """Render a few frames so that the slide content converges"""
    viewport = presentation.context.viewport
    viewport.render_frame()
    viewport.wake()
    viewport.render_frame()
    viewport.wake()
    time.sleep(0.1)
    viewport.render_frame()


def capture_slides(presentation: 'Presentation') -> list[np.ndarray]:
    """Render every slide and return the framebuffer content of each.

    Must be called from the thread running the viewport. The current
    slide is restored afterwards.
    """
    viewport = presentation.context.viewport
    images = []
    current_idx = presentation.idx
    viewport.retrieve_framebuffer = True
    try:
        for i in range(len(presentation.slides)):
            presentation.set_slide_idx(i)
            _render_settled(presentation)
            images.append(np.asarray(viewport.framebuffer.read()))
    finally:
        viewport.retrieve_framebuffer = False
        presentation.set_slide_idx(current_idx)
    return images


def write_pdf(target: str, images: list[np.ndarray], dpi: float = 96.):
    """Write one page per framebuffer image"""
    try:
        from reportlab.pdfgen import canvas
        from reportlab.lib.utils import ImageReader
    except ImportError:
        raise ImportError("Exporting slides requires reportlab")
    if len(images) == 0:
        raise ValueError("No slides to export")

    # Get size from first image
    img_width = images[0].shape[1]
    img_height = images[0].shape[0]

    # converting pixels to points, 72 points per inch
    points_width = img_width * 72 / dpi
    points_height = img_height * 72 / dpi

    c = canvas.Canvas(target, pagesize=(points_width, points_height))
    for img_array in images:
        # Convert RGBA to RGB and flip vertically
        rgb_array = np.ascontiguousarray(img_array[::-1, :, :3])

        img_data = io.BytesIO()
        imageio.v3.imwrite(img_data, rgb_array, extension=".png")
        img_data.seek(0)

        c.drawImage(ImageReader(img_data), 0, 0, width=points_width, height=points_height)
        c.showPage()
    c.save()


def export_presentation(target: str, presentation: 'Presentation'):
    """Export the presentation to a pdf file."""
    if len(presentation.slides) == 0:
        raise ValueError("No slides to export")
    images = capture_slides(presentation)
    write_pdf(target, images)
    logger.info("Exported %d slides to %s", len(images), target)
