"""
Processor for display text elements.
"""
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext


class TextProcessor(BaseElementProcessor):
    """
    Processor for headings, body text, captions and rich text.

    These components only display text and always render outside the
    screen's Form container.
    """

    kinds = (
        ElementKind.TEXT_HEADING,
        ElementKind.TEXT_SUBHEADING,
        ElementKind.TEXT_BODY,
        ElementKind.TEXT_CAPTION,
        ElementKind.RICH_TEXT,
    )

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a text element.

        Args:
            element: The text element to render
            context: Position of the element's screen within the flow

        Returns:
            Node attributes; body and caption carry their styling flags
        """
        attributes: Dict[str, Any] = {"text": element.text}

        if element.kind in (ElementKind.TEXT_BODY, ElementKind.TEXT_CAPTION):
            attributes.update(self.copy_attributes(element, ["font_weight", "visible"]))
            # Only emit styling flags that are switched on
            if element.strikethrough:
                attributes["strikethrough"] = True
            if element.markdown:
                attributes["markdown"] = True
        elif element.kind == ElementKind.RICH_TEXT:
            attributes.update(self.copy_attributes(element, ["visible"]))
            attributes["markdown"] = True
        else:
            attributes.update(self.copy_attributes(element, ["visible"]))

        return attributes
