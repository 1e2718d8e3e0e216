"""core/menu — Pure paginated menu tree.

Exports:
    Types:    ExpressionsMenu, ToggleControl, SubMenuControl, Control, ControlType
    Composer: add_control, insert_control, resolve_path, add_sub_menu,
              find_sub_menu, find_last_page, allocate_page, iter_pages
"""

from core.menu.composer import (
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
    DEFAULT_PAGE_CAPACITY,
    Control,
    ControlType,
    ExpressionsMenu,
    SubMenuControl,
    ToggleControl,
)

__all__ = [
    # Types
    "DEFAULT_PAGE_CAPACITY",
    "Control",
    "ControlType",
    "ExpressionsMenu",
    "SubMenuControl",
    "ToggleControl",
    # Composer
    "add_control",
    "add_sub_menu",
    "allocate_page",
    "find_last_page",
    "find_sub_menu",
    "insert_control",
    "iter_pages",
    "resolve_path",
]
