import pytest

from timemarches.inventory import (
    NO_COLOR,
    TEXT_FOCUSED,
    TEXT_NORMAL,
    Inventory,
    InventoryItem,
    InventoryMenu,
)


def _inventory(count):
    return Inventory([InventoryItem(f"item {n}", "desc") for n in range(count)])


def test_starting_inventory_contents():
    inventory = Inventory.starting()
    assert [item.name for item in inventory] == ["Pencil", "Note (1)"]
    assert inventory.items[0].description == "You keep it on you at all times."
    assert inventory.items[1].description == "A note."


def test_pick_up_appends_and_plays_sound():
    inventory = Inventory.starting()
    item = InventoryItem("My item", "My description...")
    cue = inventory.pick_up(item)
    assert inventory.items[-1] == item
    assert len(inventory) == 3
    assert cue.path == "audio/sfx/pickup.wav"


def test_build_places_items_row_major():
    inventory = _inventory(7)
    menu = InventoryMenu.build(inventory)
    ordered = [menu.slots[slot] for slot in sorted(menu.slots)]
    assert ordered == inventory.items
    assert all(col < 3 for _, col in menu.slots)
    assert all(row < menu.rows for row, _ in menu.slots)
    assert menu.focus == (0, 0)
    assert menu.scroll.scroll_step == 200.0


def test_rows_loop_east():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.navigate(1.0, 0.0) is not None
    assert menu.focus == (0, 1)
    menu.navigate(1.0, 0.0)
    assert menu.focus == (0, 0)
    menu.navigate(-1.0, 0.0)
    assert menu.focus == (0, 1)


def test_columns_do_not_loop():
    menu = InventoryMenu.build(_inventory(7))
    menu.navigate(0.0, -1.0)
    assert menu.focus == (1, 0)
    menu.navigate(0.0, -1.0)
    assert menu.focus == (2, 0)
    assert menu.navigate(0.0, -1.0) is None
    assert menu.focus == (2, 0)
    menu.navigate(0.0, 1.0)
    assert menu.focus == (1, 0)


def test_navigate_at_rest_does_nothing():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.navigate(0.0, 0.0) is None
    assert menu.focus == (0, 0)


def test_navigate_sound():
    menu = InventoryMenu.build(Inventory.starting())
    cue = menu.navigate(1.0, 0.0)
    assert cue.path == "medium.wav"
    assert cue.volume.decibels == -6.0


def test_empty_inventory_has_no_focus():
    menu = InventoryMenu.build(Inventory())
    assert menu.focus is None
    assert menu.slots == {}
    assert menu.navigate(1.0, 0.0) is None


def test_hover_focuses_slot():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.hover((0, 1)) is True
    assert menu.focus == (0, 1)
    assert menu.hover((5, 5)) is False
    assert menu.focus == (0, 1)


def test_click_starts_reset_timer():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.click((0, 0)) is True
    assert menu.tick(0.2) == []
    assert menu.tick(0.1) == [(0, 0)]
    assert menu.tick(0.1) == []


def test_click_unknown_slot_not_handled():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.click((9, 9)) is False


def test_colors_follow_focus():
    menu = InventoryMenu.build(Inventory.starting())
    assert menu.text_color((0, 0)) == TEXT_FOCUSED
    assert menu.text_color((0, 1)) == TEXT_NORMAL
    assert menu.background_color((0, 0)) == TEXT_NORMAL
    assert menu.background_color((0, 1)) == NO_COLOR
    menu.focus_visible = False
    assert menu.background_color((0, 0)) == NO_COLOR


def test_colors_for_unknown_slot_raise():
    menu = InventoryMenu.build(Inventory.starting())
    with pytest.raises(KeyError):
        menu.text_color((3, 3))
    with pytest.raises(KeyError):
        menu.background_color((3, 3))


def test_close_clears_navigation():
    menu = InventoryMenu.build(Inventory.starting())
    menu.close()
    assert menu.focus is None
    assert len(menu.navigation) == 0