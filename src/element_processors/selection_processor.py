"""
Processor for selection elements.
"""
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext


class SelectionProcessor(BaseElementProcessor):
    """
    Processor for checkbox groups, radio buttons, dropdowns and opt-ins.

    The editor stores the choices of radio buttons and dropdowns as
    ``options``; the runtime reads every choice list from ``dataSource``.
    """

    kinds = (
        ElementKind.CHECKBOX_GROUP,
        ElementKind.RADIO_BUTTONS_GROUP,
        ElementKind.DROPDOWN,
        ElementKind.OPT_IN,
    )

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a selection element.

        Args:
            element: The selection element to render
            context: Position of the element's screen within the flow

        Returns:
            Node attributes
        """
        attributes: Dict[str, Any] = {"label": element.label, "name": element.name}

        if element.kind == ElementKind.OPT_IN:
            attributes.update(self.copy_attributes(element, ["required", "visible"]))
            return attributes

        if element.kind == ElementKind.CHECKBOX_GROUP:
            choices = element.data_source
            optional = [
                "required", "min_selected_items", "max_selected_items", "enabled", "visible", "description",
            ]
        else:
            choices = element.options
            optional = ["required", "description", "enabled", "visible"]

        attributes["dataSource"] = self._dump_value(choices)
        attributes.update(self.copy_attributes(element, optional))
        return attributes
