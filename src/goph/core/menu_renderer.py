"""Plain-text renderer for menus."""

from .menu import Menu


class MenuRenderer:
    """Renders a menu as numbered lines of text."""

    def render(self, menu: Menu, title: str | None = None) -> str:
        """
        Render menu items, one per line.

        Navigable items are prefixed with their 1-based position in the
        menu and their type; informational lines are indented to line up.

        Args:
            menu: The menu to render.
            title: Optional title shown as a header.

        Returns:
            Formatted menu string.
        """
        lines = []

        if title:
            lines.append(f"[{title}]")

        if not len(menu):
            lines.append("(empty)")
            return "\n".join(lines)

        width = len(str(len(menu)))
        for i, item in enumerate(menu, 1):
            if item.is_info():
                lines.append(f"{'':>{width}}      {item.name}")
            else:
                lines.append(f"{i:>{width}}. [{item.type}] {item.name}")

        return "\n".join(lines)
