"""
Tests for core.menu — page chains, overflow, submenu paths and duplicates.
"""

import pytest

from core.errors import InvariantViolation
from core.menu.composer import (
    PAGE_LINK_PATTERN,
    add_control,
    add_sub_menu,
    allocate_page,
    find_last_page,
    find_sub_menu,
    insert_control,
    iter_pages,
    resolve_path,
)
from core.menu.types import (
    ControlType,
    ExpressionsMenu,
    SubMenuControl,
    ToggleControl,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_toggle(index: int) -> ToggleControl:
    return ToggleControl(name=f"c{index}", parameter_name=f"p{index}", value=0)


def _make_menu(count: int = 0, capacity: int = 8) -> ExpressionsMenu:
    menu = ExpressionsMenu(name="Root", capacity=capacity)
    for i in range(1, count + 1):
        assert insert_control(menu, _make_toggle(i))
    return menu


def _names(menu: ExpressionsMenu) -> list[str]:
    return [c.name for c in menu.controls]


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class TestControlTypes:
    def test_toggle_key_normalises_value(self) -> None:
        assert ToggleControl("Hat", "Hat", 1).key == ToggleControl("Hat", "Hat", 1.0).key

    def test_keys_differ_by_value(self) -> None:
        assert ToggleControl("Hat", "Hat", 1).key != ToggleControl("Hat", "Hat", 2).key

    def test_sub_menu_key_ignores_target(self) -> None:
        a = SubMenuControl("Sounds", ExpressionsMenu("A"))
        b = SubMenuControl("Sounds", None)
        assert a.key == b.key
        assert a.type is ControlType.SUB_MENU

    def test_capacity_below_two_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            ExpressionsMenu("Root", capacity=1)

    def test_to_dict_nests_sub_menus(self) -> None:
        menu = ExpressionsMenu("Root")
        menu.controls.append(SubMenuControl("Sounds", ExpressionsMenu("Sounds")))
        data = menu.to_dict()

        assert data["controls"][0]["type"] == "sub_menu"
        assert data["controls"][0]["sub_menu"]["name"] == "Sounds"


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPagination:
    def test_capacity_controls_fit_on_one_page(self) -> None:
        menu = _make_menu(8)

        assert _names(menu) == [f"c{i}" for i in range(1, 9)]
        assert find_last_page(menu) is menu
        assert iter_pages(menu) == [menu]

    def test_overflow_moves_last_control_to_new_page(self) -> None:
        menu = _make_menu(9)

        assert len(menu.controls) == 8
        assert _names(menu) == [f"c{i}" for i in range(1, 8)] + ["Page 2"]
        page2 = menu.controls[-1].sub_menu
        assert page2.name == "Root Page 2"
        assert _names(page2) == ["c8", "c9"]
        assert find_last_page(menu) is page2

    def test_pages_chain_with_increasing_numbers(self) -> None:
        # 7 + 7 on two linked pages, then one more spills into page 3
        menu = _make_menu(16)
        pages = iter_pages(menu)

        assert [p.name for p in pages] == ["Root", "Root Page 2", "Root Page 3"]
        assert _names(pages[1])[-1] == "Page 3"
        assert _names(pages[2]) == ["c15", "c16"]
        assert find_last_page(menu) is pages[2]
        for page in pages:
            assert len(page.controls) <= page.capacity

    def test_no_page_exceeds_capacity(self) -> None:
        menu = _make_menu(40, capacity=4)
        pages = iter_pages(menu)
        payload = [c for p in pages for c in p.controls if not PAGE_LINK_PATTERN.fullmatch(c.name)]

        assert all(len(p.controls) <= 4 for p in pages)
        assert [c.name for c in payload] == [f"c{i}" for i in range(1, 41)]

    def test_non_sequential_page_link_is_followed(self) -> None:
        menu = ExpressionsMenu("Root")
        page3 = _make_menu(8)
        menu.controls.append(_make_toggle(0))
        menu.controls.append(SubMenuControl("Page 3", page3))

        assert insert_control(menu, ToggleControl("new", "new", 0)) is True

        assert len(menu.controls) == 2
        assert page3.controls[-1].name == "Page 4"
        page4 = page3.controls[-1].sub_menu
        assert page4.name == "Root Page 4"
        assert _names(page4) == ["c8", "new"]
        assert find_last_page(menu) is page4

    def test_allocate_page_on_non_full_terminal_raises(self) -> None:
        menu = _make_menu(3)
        with pytest.raises(InvariantViolation):
            allocate_page(menu)

    def test_allocate_page_returns_new_terminal(self) -> None:
        menu = _make_menu(8)
        page = allocate_page(menu)

        assert find_last_page(menu) is page
        assert _names(page) == ["c8"]
        assert menu.controls[-1].name == "Page 2"

    def test_dangling_page_link_is_terminal(self) -> None:
        menu = ExpressionsMenu("Root")
        menu.controls.append(SubMenuControl("Page 2", None))
        assert find_last_page(menu) is menu


# ---------------------------------------------------------------------------
# Duplicates
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_identical_toggle_is_dropped(self) -> None:
        menu = ExpressionsMenu("Root")

        assert insert_control(menu, ToggleControl("Hat", "Hat", 0)) is True
        assert insert_control(menu, ToggleControl("Hat", "Hat", 0)) is False
        assert len(menu.controls) == 1

    def test_same_name_different_value_is_kept(self) -> None:
        menu = ExpressionsMenu("Root")
        insert_control(menu, ToggleControl("Outfit", "Outfit", 1))
        insert_control(menu, ToggleControl("Outfit", "Outfit", 2))
        assert len(menu.controls) == 2

    def test_duplicate_check_uses_landing_page(self) -> None:
        menu = _make_menu(9)
        # c9 sits on page 2, so a second c9 is dropped there
        assert insert_control(menu, _make_toggle(9)) is False
        # c1 sits on page 1 only, so it is added to page 2
        assert insert_control(menu, _make_toggle(1)) is True
        assert _names(find_last_page(menu)) == ["c8", "c9", "c1"]


# ---------------------------------------------------------------------------
# Submenus and paths
# ---------------------------------------------------------------------------


class TestSubMenus:
    def test_path_creates_nested_submenus(self) -> None:
        menu = ExpressionsMenu("Root")

        assert add_control(menu, "Sounds/Cow", "Moo", "Moo", 0) is True

        sounds = find_sub_menu(menu, "Sounds").sub_menu
        cow = find_sub_menu(sounds, "Cow").sub_menu
        assert _names(menu) == ["Sounds"]
        assert _names(sounds) == ["Cow"]
        assert cow.controls == [ToggleControl("Moo", "Moo", 0.0)]

    def test_repeated_path_reuses_submenus(self) -> None:
        menu = ExpressionsMenu("Root")
        add_control(menu, "Sounds/Cow", "Moo", "Moo", 0)
        add_control(menu, "Sounds/Cow", "Moo", "Moo", 0)
        add_control(menu, "Sounds/Cow", "Bell", "Bell", 0)

        cow = resolve_path(menu, "Sounds/Cow")
        assert len(menu.controls) == 1
        assert _names(cow) == ["Moo", "Bell"]

    def test_empty_path_resolves_to_root(self) -> None:
        menu = ExpressionsMenu("Root")
        assert resolve_path(menu, "") is menu
        assert resolve_path(menu, None) is menu
        assert resolve_path(menu, "/") is menu

    def test_empty_segments_are_ignored(self) -> None:
        menu = ExpressionsMenu("Root")
        cow = resolve_path(menu, "/Sounds//Cow/")
        assert resolve_path(menu, "Sounds/Cow") is cow
        assert _names(menu) == ["Sounds"]

    def test_segments_match_names_exactly(self) -> None:
        menu = ExpressionsMenu("Root")
        cow = resolve_path(menu, "Cow")
        padded = resolve_path(menu, " Cow")

        assert padded is not cow
        assert _names(menu) == ["Cow", " Cow"]

    def test_custom_delimiter(self) -> None:
        menu = ExpressionsMenu("Root")
        cow = resolve_path(menu, "Sounds>Cow", delimiter=">")
        assert cow.name == "Cow"
        assert find_sub_menu(menu, "Sounds") is not None

    def test_null_target_gets_fresh_container(self) -> None:
        menu = ExpressionsMenu("Root")
        link = SubMenuControl("Sounds", None)
        menu.controls.append(link)

        sounds = add_sub_menu(menu, "Sounds")

        assert link.sub_menu is sounds
        assert len(menu.controls) == 1

    def test_submenu_found_on_later_page(self) -> None:
        menu = _make_menu(8)
        sounds = add_sub_menu(menu, "Sounds")
        assert find_last_page(menu) is not menu

        assert add_sub_menu(menu, "Sounds") is sounds
        link_count = sum(1 for p in iter_pages(menu) for c in p.controls if c.name == "Sounds")
        assert link_count == 1

    def test_submenu_inherits_capacity(self) -> None:
        menu = ExpressionsMenu("Root", capacity=4)
        assert add_sub_menu(menu, "Sounds").capacity == 4

    def test_submenu_link_overflows_like_any_control(self) -> None:
        menu = _make_menu(8)
        add_control(menu, "Sounds", "Moo", "Moo", 0)

        assert len(menu.controls) == 8
        assert menu.controls[-1].name == "Page 2"
        assert _names(menu.controls[-1].sub_menu) == ["c8", "Sounds"]
