"""Tests for in-memory keyset pagination."""

import pytest

from mtg_inventory.models.card import InventoryCard
from mtg_inventory.models.card_filter import CardFilter
from mtg_inventory.models.failure import InvalidPageRequestError
from mtg_inventory.services.pagination import END_OF_COLLECTION, InventoryPage, paginate


@pytest.fixture
def five_cards() -> list[InventoryCard]:
    return [InventoryCard(id=i, name=f"Card {i}", quantity=1) for i in range(1, 6)]


class TestPaginate:
    def test_walks_collection(self, five_cards: list[InventoryCard]) -> None:
        first = paginate(five_cards, cursor=0, page_size=2)
        assert [card.id for card in first.items] == [1, 2]
        assert first.next_cursor == 2

        second = paginate(five_cards, cursor=first.next_cursor, page_size=2)
        assert [card.id for card in second.items] == [3, 4]
        assert second.next_cursor == 4

        third = paginate(five_cards, cursor=second.next_cursor, page_size=2)
        assert [card.id for card in third.items] == [5]
        assert third.next_cursor == 5

        last = paginate(five_cards, cursor=third.next_cursor, page_size=2)
        assert last.items == []
        assert last.next_cursor == END_OF_COLLECTION
        assert last.is_empty

    def test_unsorted_snapshot_is_ordered_by_id(self, five_cards: list[InventoryCard]) -> None:
        shuffled = [five_cards[3], five_cards[0], five_cards[4], five_cards[2], five_cards[1]]
        page = paginate(shuffled, cursor=0, page_size=3)
        assert [card.id for card in page.items] == [1, 2, 3]

    def test_cursor_between_ids(self) -> None:
        inventory = [InventoryCard(id=i, name="Card", quantity=1) for i in (10, 20, 30)]
        page = paginate(inventory, cursor=15, page_size=5)
        assert [card.id for card in page.items] == [20, 30]
        assert page.next_cursor == 30

    def test_empty_inventory(self) -> None:
        page = paginate([], cursor=0, page_size=10)
        assert page == InventoryPage()

    def test_filter_applied_before_limit(self, sample_inventory) -> None:
        page = paginate(sample_inventory, cursor=0, page_size=1, card_filter=CardFilter(cmc=4))
        assert [card.id for card in page.items] == [2]

        page = paginate(
            sample_inventory, cursor=page.next_cursor, page_size=1, card_filter=CardFilter(cmc=4)
        )
        assert [card.id for card in page.items] == [3]

    def test_blank_filter_fields_are_skipped(self, sample_inventory) -> None:
        page = paginate(
            sample_inventory, cursor=0, page_size=10, card_filter=CardFilter(name="", type_line=" ")
        )
        assert len(page.items) == len(sample_inventory)

    def test_negative_cursor_rejected(self, five_cards: list[InventoryCard]) -> None:
        with pytest.raises(InvalidPageRequestError):
            paginate(five_cards, cursor=-1, page_size=2)

    def test_zero_page_size_rejected(self, five_cards: list[InventoryCard]) -> None:
        with pytest.raises(InvalidPageRequestError):
            paginate(five_cards, cursor=0, page_size=0)
