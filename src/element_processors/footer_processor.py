"""
Processor for Footer elements.
"""
import logging
from typing import Any, Dict, List

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, FooterAction, Screen, ScreenContext


class FooterProcessor(BaseElementProcessor):
    """
    Processor for the Footer, the navigation button of a screen.

    The Footer renders the click action that moves the user on. Its payload
    forwards the answers collected so far:

    - navigate: the current screen's fields as ``${form.<name>}``
    - complete: the current screen's fields as ``${form.<name>}`` plus the
      fields of every earlier screen as ``${data.<name>}``

    When the author listed ``payloadKeys``, only those keys are forwarded, in
    the listed order.
    """

    kinds = (ElementKind.FOOTER,)

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a Footer element.

        Args:
            element: The Footer to render
            context: Position of the Footer's screen within the flow

        Returns:
            Node attributes including the ``onClickAction``
        """
        attributes: Dict[str, Any] = {"label": element.label}
        attributes.update(self.copy_attributes(
            element, ["left_caption", "center_caption", "right_caption", "enabled"]
        ))

        payload = self._build_payload(element, context)
        if element.action == FooterAction.NAVIGATE:
            attributes["onClickAction"] = {
                "name": "navigate",
                "next": {"type": "screen", "name": element.next_screen},
                "payload": payload,
            }
        else:
            attributes["onClickAction"] = {
                "name": "complete",
                "payload": payload,
            }
        return attributes

    def _build_payload(self, element: BaseElement, context: ScreenContext) -> Dict[str, str]:
        """
        Build the payload forwarded by the Footer's click action.

        Args:
            element: The Footer being rendered
            context: Position of the Footer's screen within the flow

        Returns:
            Mapping of field name to binding expression
        """
        form_fields = self._field_names([context.screen])
        previous_fields = self._field_names(context.previous_screens)

        available: Dict[str, str] = {name: f"${{form.{name}}}" for name in form_fields}
        if element.action == FooterAction.COMPLETE:
            for name in previous_fields:
                available[name] = f"${{data.{name}}}"

        if not element.payload_keys:
            return available

        payload: Dict[str, str] = {}
        for key in element.payload_keys:
            if key in available:
                payload[key] = available[key]
            elif key in previous_fields:
                payload[key] = f"${{data.{key}}}"
            else:
                self.logger.debug(f"Payload key '{key}' on screen {context.screen.id} matches no field")
        return payload

    @staticmethod
    def _field_names(screens: List[Screen]) -> List[str]:
        names: List[str] = []
        for screen in screens:
            for element in screen.elements:
                name = getattr(element, "name", None)
                if name and element.kind != ElementKind.FOOTER and name not in names:
                    names.append(name)
        return names
