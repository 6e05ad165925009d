"""Application menu construction."""

from __future__ import annotations

from webview.menu import Menu, MenuAction

from flappybingus_client.shell.backend import ClientActions

__all__ = ["menu_build"]


def menu_build(actions: ClientActions) -> list[Menu]:
    """
    Build the Game and View menus.

    Args:
        actions: Operations the menu items trigger.

    Returns:
        Menus in menu-bar order.
    """
    game_menu = Menu(
        "Game",
        [
            MenuAction("Reload", actions.page_reload),
            MenuAction("Open in Browser", actions.external_open),
        ],
    )
    view_menu = Menu(
        "View",
        [
            MenuAction("Zoom In", actions.zoom_increase),
            MenuAction("Zoom Out", actions.zoom_decrease),
            MenuAction("Reset Zoom", actions.zoom_reset),
        ],
    )
    return [game_menu, view_menu]
