"""
Processor for If and Switch elements.
"""
import logging
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext


class ConditionalProcessor(BaseElementProcessor):
    """
    Processes conditional elements.

    If and Switch elements hold nested element lists that the runtime shows
    depending on a data value. The nested lists are rendered through the
    element chain processor, so they may hold any catalog kind, including
    further conditionals.
    """

    kinds = (
        ElementKind.IF,
        ElementKind.SWITCH,
    )

    def __init__(self, element_chain_processor):
        """
        Initialize the conditional processor.

        Args:
            element_chain_processor: Element chain processor for rendering nested branches
        """
        self.element_chain_processor = element_chain_processor
        self.logger = logging.getLogger(__name__)

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render an If or Switch element with its branches.
        """
        if element.kind == ElementKind.IF:
            attributes: Dict[str, Any] = {
                "condition": element.condition,
                "then": self.element_chain_processor.process_chain(element.then, context),
            }
            if element.else_:
                attributes["else"] = self.element_chain_processor.process_chain(element.else_, context)
            attributes.update(self.copy_attributes(element, ["visible"]))
            return attributes

        self.logger.debug(f"Rendering {len(element.cases)} cases of switch {element.id}")
        attributes = {
            "value": element.value,
            "cases": [
                {
                    "case": case.case,
                    "elements": self.element_chain_processor.process_chain(case.elements, context),
                }
                for case in element.cases
            ],
        }
        if element.default:
            attributes["default"] = self.element_chain_processor.process_chain(element.default, context)
        attributes.update(self.copy_attributes(element, ["visible"]))
        return attributes
