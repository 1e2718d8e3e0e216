"""core/menu/composer.py — Insert controls into a paginated menu tree.

Pagination
──────────
A page holds ``capacity`` controls.  When the last page of a container is
full, a new page is chained off it::

    [Root]  c1 … c7, "Page 2" ─▶ [Root Page 2]  c8, c9 …, "Page 3" ─▶ …

The terminal page's last control moves to the new page and the ``"Page N"``
link takes its slot, so a page that has a continuation holds
``capacity - 1`` payload controls.  Page numbers start at 2 (the origin
container is page 1).

Pure module — no I/O.
"""

from __future__ import annotations

import logging
import re

from core.errors import InvariantViolation
from core.menu.types import Control, ExpressionsMenu, SubMenuControl, ToggleControl

logger = logging.getLogger(__name__)

PAGE_LINK_PATTERN = re.compile(r"Page (\d+)")
FIRST_PAGE_NUMBER: int = 2

# ---------------------------------------------------------------------------
# Page chain
# ---------------------------------------------------------------------------


def _page_link(container: ExpressionsMenu) -> SubMenuControl | None:
    for control in container.sub_menu_controls():
        if control.sub_menu is not None and PAGE_LINK_PATTERN.fullmatch(control.name):
            return control
    return None


def iter_pages(container: ExpressionsMenu) -> list[ExpressionsMenu]:
    """Return ``container`` followed by every page chained off it."""
    pages = [container]
    seen = {id(container)}
    link = _page_link(container)
    while link is not None and id(link.sub_menu) not in seen:
        page = link.sub_menu
        pages.append(page)
        seen.add(id(page))
        link = _page_link(page)
    return pages


def find_last_page(container: ExpressionsMenu) -> ExpressionsMenu:
    """Follow ``"Page N"`` links from ``container`` and return the terminal page.

    A container without a page link is its own last page.
    """
    return iter_pages(container)[-1]


def _highest_page_number(pages: list[ExpressionsMenu]) -> int:
    numbers = [
        int(match.group(1))
        for page in pages
        for control in page.sub_menu_controls()
        if (match := PAGE_LINK_PATTERN.fullmatch(control.name))
    ]
    return max(numbers, default=FIRST_PAGE_NUMBER - 1)


def allocate_page(container: ExpressionsMenu) -> ExpressionsMenu:
    """Chain a new page after the last page of ``container``.

    ``container`` is the origin of the chain.  The new page is numbered one
    past the highest ``"Page N"`` found along the chain, so links need not be
    sequential.  The terminal page's last control moves onto the new page and
    the link is appended in its place.

    Returns:
        The new, terminal page.

    Raises:
        InvariantViolation: If the terminal page is not full.
    """
    pages = iter_pages(container)
    terminal = pages[-1]
    if not terminal.is_full:
        raise InvariantViolation(
            f"allocate_page called on {terminal.name!r} with "
            f"{len(terminal.controls)}/{terminal.capacity} controls"
        )

    page_number = _highest_page_number(pages) + 1
    page = ExpressionsMenu(name=f"{container.name} Page {page_number}", capacity=terminal.capacity)
    page.controls.append(terminal.controls.pop())
    terminal.controls.append(SubMenuControl(name=f"Page {page_number}", sub_menu=page))
    logger.info("Menu %r is full, added page %d", container.name, page_number)
    return page


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def insert_control(container: ExpressionsMenu, control: Control) -> bool:
    """Append ``control`` to the last page of ``container``.

    A full last page triggers :func:`allocate_page` first.  The duplicate check
    runs against the page the control would land on.

    Returns:
        True if the control was added, False if an identical control was
        already on that page.
    """
    page = find_last_page(container)
    if page.is_full:
        page = allocate_page(container)

    if any(existing.key == control.key for existing in page.controls):
        logger.debug("Control %r already present in %r", control.name, page.name)
        return False

    page.controls.append(control)
    return True


def find_sub_menu(container: ExpressionsMenu, name: str) -> SubMenuControl | None:
    """Find the submenu control called ``name`` on any page of ``container``."""
    for page in iter_pages(container):
        for control in page.sub_menu_controls():
            if control.name == name:
                return control
    return None


def add_sub_menu(container: ExpressionsMenu, name: str) -> ExpressionsMenu:
    """Return the submenu ``name`` of ``container``, creating it if needed.

    A matching control without a target is given a fresh container instead of
    being duplicated.
    """
    existing = find_sub_menu(container, name)
    if existing is not None:
        if existing.sub_menu is None:
            existing.sub_menu = ExpressionsMenu(name=name, capacity=container.capacity)
        return existing.sub_menu

    sub_menu = ExpressionsMenu(name=name, capacity=container.capacity)
    insert_control(container, SubMenuControl(name=name, sub_menu=sub_menu))
    return sub_menu


def resolve_path(root: ExpressionsMenu, path: str | None, delimiter: str = "/") -> ExpressionsMenu:
    """Walk ``path`` from ``root``, creating one submenu level per segment.

    Empty segments are ignored, so ``None``, ``""`` and ``"/"`` all resolve to
    ``root`` itself.
    """
    container = root
    if not path:
        return container
    for segment in path.split(delimiter):
        if segment:
            container = add_sub_menu(container, segment)
    return container


def add_control(
    root: ExpressionsMenu,
    folder_path: str | None,
    control_name: str,
    parameter_name: str,
    value: float = 0.0,
    *,
    delimiter: str = "/",
) -> bool:
    """Add a toggle under ``folder_path`` (``root`` itself when empty).

    Example::

        add_control(menu, "Sounds/Cow", "Moo", "Moo", 0)

    Returns:
        True if a new control was added, False if it was a duplicate.
    """
    container = resolve_path(root, folder_path, delimiter)
    toggle = ToggleControl(name=control_name, parameter_name=parameter_name, value=value)
    return insert_control(container, toggle)
