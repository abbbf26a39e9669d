"""
Processor for free-text entry elements.
"""
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext


class InputProcessor(BaseElementProcessor):
    """
    Processor for text inputs and text areas.

    EmailInput and PhoneInput are palette conveniences: the runtime only knows
    TextInput, so they render as a TextInput with a fixed ``inputType``.
    """

    kinds = (
        ElementKind.TEXT_INPUT,
        ElementKind.EMAIL_INPUT,
        ElementKind.PHONE_INPUT,
        ElementKind.TEXT_AREA,
    )

    # Palette kind -> fixed input type of the rendered TextInput
    INPUT_TYPES = {
        ElementKind.EMAIL_INPUT: "email",
        ElementKind.PHONE_INPUT: "phone",
    }

    def get_component_type(self, element: BaseElement) -> str:
        if element.kind in self.INPUT_TYPES:
            return ElementKind.TEXT_INPUT
        return element.kind

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a text entry element.

        Args:
            element: The input element to render
            context: Position of the element's screen within the flow

        Returns:
            Node attributes
        """
        if element.kind == ElementKind.TEXT_AREA:
            attributes: Dict[str, Any] = {"label": element.label, "name": element.name}
            attributes.update(self.copy_attributes(
                element,
                ["required", "max_length", "helper_text", "enabled", "init_value", "error_message"],
            ))
            return attributes

        if element.kind == ElementKind.TEXT_INPUT:
            input_type = element.input_type or "text"
        else:
            input_type = self.INPUT_TYPES[element.kind]

        attributes = {"inputType": input_type, "label": element.label, "name": element.name}
        if element.kind == ElementKind.TEXT_INPUT:
            attributes.update(self.copy_attributes(
                element,
                ["required", "pattern", "helper_text", "min_chars", "max_chars", "init_value", "error_message"],
            ))
        else:
            attributes.update(self.copy_attributes(element, ["required", "helper_text"]))
        return attributes
