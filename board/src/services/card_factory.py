"""Factories for new cards.

Image cards read their natural dimensions from the image data with
Pillow so the presentation can scale the picture from its natural size
to whatever size the card is resized to.
"""

import base64
import io

from PIL import Image

from constants import MAX_IMAGE_CARD_WIDTH
from models.card import Card, CardType
from models.geometry import Vec2, Size


def create_text_card(x, y, text=''):
    return Card(type=CardType.TEXT, content=text, position=Vec2(x, y))


def create_link_card(x, y, url):
    return Card(type=CardType.LINK, content=url, position=Vec2(x, y))


def decode_data_url(data_url):
    """Return the raw bytes of a base64 data URL."""
    header, _, payload = data_url.partition(',')
    if not header.startswith('data:') or ';base64' not in header:
        raise ValueError("Not a base64 data URL")
    return base64.b64decode(payload)


def image_natural_size(source):
    """Read width/height of an image given as a file path or data URL.
    
    Raises:
        OSError / ValueError: unreadable image
    """
    if source.startswith('data:'):
        with Image.open(io.BytesIO(decode_data_url(source))) as img:
            return Size(*img.size)
    with Image.open(source) as img:
        return Size(*img.size)


def initial_image_size(natural_size, max_width=MAX_IMAGE_CARD_WIDTH):
    """Card size for a fresh image: natural size, capped to max_width."""
    if natural_size.w <= max_width:
        return Size(natural_size.w, natural_size.h)
    ratio = max_width / natural_size.w
    return Size(max_width, natural_size.h * ratio)


def create_image_card(x, y, source):
    natural = image_natural_size(source)
    return Card(type=CardType.IMAGE, content=source, position=Vec2(x, y),
                size=initial_image_size(natural), natural_size=natural)
