"""
Tests for the card store, card factories and font size stepping.
"""
import base64
import io

import pytest
from PIL import Image

from constants import FONT_SIZES, MAX_IMAGE_CARD_WIDTH
from models.card import Card, CardType
from models.geometry import Size, Vec2
from services.card_store import CardStore, next_font_size, previous_font_size, current_font_size
from services.card_factory import (
    create_text_card, create_link_card, create_image_card,
    image_natural_size, initial_image_size, decode_data_url,
)


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "photo.png"
    Image.new('RGB', (800, 600), (200, 30, 30)).save(path)
    return str(path)


class TestCardStore:

    def test_add_and_get(self, store):
        card = create_text_card(10, 20, "hello")
        store.add_card(card)
        assert store.get_card(card.id) is card
        assert card.id in store

    def test_update_position_and_size(self, store):
        card = create_text_card(0, 0)
        store.add_card(card)
        store.update_card_position(card.id, 110, 105)
        store.update_card_size(card.id, 60, 30)
        assert card.position == Vec2(110, 105)
        assert card.size == Size(60, 30)

    def test_unknown_card_raises(self, store):
        with pytest.raises(KeyError):
            store.update_card_position('missing', 1, 1)

    def test_listeners_notified(self, store):
        changes = []
        store.subscribe(lambda change, card_id: changes.append(change))
        card = create_text_card(0, 0)
        store.add_card(card)
        store.update_card_position(card.id, 1, 1)
        store.update_card_content(card.id, "text")
        store.update_card_content(card.id, "text")
        store.remove_card(card.id)
        assert changes == [CardStore.CHANGE_ADDED, CardStore.CHANGE_POSITION,
                           CardStore.CHANGE_CONTENT, CardStore.CHANGE_REMOVED]

    def test_font_size_only_for_text(self, store):
        link = create_link_card(0, 0, "https://example.com")
        store.add_card(link)
        with pytest.raises(ValueError):
            store.update_card_font_size(link.id, 18)

    def test_load_dict_replaces_cards(self, store):
        card = create_text_card(5, 6, "kept")
        card.size = Size(150, 90)
        card.font_size = 24
        data = CardStore()
        data.add_card(card)

        store.add_card(create_text_card(0, 0, "dropped"))
        store.load_dict(data.to_dict())

        [loaded] = store.cards()
        assert loaded.id == card.id
        assert loaded.position == Vec2(5, 6)
        assert loaded.size == Size(150, 90)
        assert loaded.font_size == 24


class TestCardModel:

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            Card(type='video')

    def test_serialized_keys(self):
        card = Card(type=CardType.IMAGE, content='x.png', natural_size=Size(10, 5), size=Size(20, 5))
        data = card.to_dict()
        assert data['naturalSize'] == {'w': 10, 'h': 5}
        assert 'fontSize' not in data

    def test_image_scale_per_axis(self):
        card = Card(type=CardType.IMAGE, natural_size=Size(200, 100), size=Size(100, 100))
        assert card.image_scale() == (0.5, 1.0)

    def test_image_scale_for_visual_size(self):
        card = Card(type=CardType.IMAGE, natural_size=Size(200, 100), size=Size(100, 100))
        assert card.image_scale(Size(400, 50)) == (2.0, 0.5)

    def test_image_scale_none_without_sizes(self):
        assert Card(type=CardType.IMAGE).image_scale() is None
        assert Card(type=CardType.TEXT, size=Size(1, 1)).image_scale() is None


class TestImageCards:

    def test_natural_size_from_file(self, png_path):
        assert image_natural_size(png_path) == Size(800, 600)

    def test_natural_size_from_data_url(self):
        buffer = io.BytesIO()
        Image.new('RGB', (30, 20)).save(buffer, format='PNG')
        url = 'data:image/png;base64,' + base64.b64encode(buffer.getvalue()).decode('ascii')
        assert image_natural_size(url) == Size(30, 20)

    def test_decode_rejects_plain_text(self):
        with pytest.raises(ValueError):
            decode_data_url('hello')

    def test_wide_image_capped(self):
        assert initial_image_size(Size(800, 600)) == Size(MAX_IMAGE_CARD_WIDTH, 300)

    def test_small_image_kept(self):
        assert initial_image_size(Size(120, 90)) == Size(120, 90)

    def test_create_image_card(self, png_path):
        card = create_image_card(3, 4, png_path)
        assert card.type == CardType.IMAGE
        assert card.natural_size == Size(800, 600)
        assert card.size.w == MAX_IMAGE_CARD_WIDTH


class TestFontSizeStepping:

    def test_default_font_size(self):
        assert current_font_size(create_text_card(0, 0)) == 14

    def test_step_up_and_down(self):
        assert next_font_size(14) == 18
        assert previous_font_size(14) == 12

    def test_limits(self):
        assert next_font_size(FONT_SIZES[-1]) is None
        assert previous_font_size(FONT_SIZES[0]) is None

    def test_off_list_sizes_snap_to_neighbour(self):
        assert next_font_size(20) == 24
        assert previous_font_size(20) == 18
