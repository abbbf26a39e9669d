"""
Processor for embedded links and navigation lists.
"""
import copy
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext


class NavigationProcessor(BaseElementProcessor):
    """
    Processor for EmbeddedLink and NavigationList elements.

    A link's ``url`` becomes an ``open_url`` click action. Navigation list
    items with a ``nextScreen`` get a ``navigate`` click action; they do not
    contribute to the routing model, which is derived from Footers only.
    """

    kinds = (
        ElementKind.EMBEDDED_LINK,
        ElementKind.NAVIGATION_LIST,
    )

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a link or navigation list.

        Args:
            element: The element to render
            context: Position of the element's screen within the flow

        Returns:
            Node attributes
        """
        if element.kind == ElementKind.EMBEDDED_LINK:
            attributes: Dict[str, Any] = {"text": element.text}
            if element.url:
                attributes["onClickAction"] = {"name": "open_url", "url": element.url}
            attributes.update(self.copy_attributes(element, ["visible"]))
            return attributes

        attributes = {
            "name": element.name,
            "listItems": [self._process_list_item(item) for item in element.list_items],
        }
        attributes.update(self.copy_attributes(element, ["label", "description"]))
        return attributes

    def _process_list_item(self, item) -> Dict[str, Any]:
        """Render one navigation list row."""
        rendered: Dict[str, Any] = {
            "id": item.id,
            "mainContent": self._dump_value(item.main_content),
        }
        if item.start is not None:
            rendered["start"] = self._dump_value(item.start)
        if item.end is not None:
            rendered["end"] = self._dump_value(item.end)
        if item.next_screen:
            rendered["onClickAction"] = {
                "name": "navigate",
                "next": {"type": "screen", "name": item.next_screen},
                "payload": copy.deepcopy(item.payload or {}),
            }
        return rendered
