"""
Processor for screens, assembling each screen's layout.
"""
import logging
from typing import List

from element_processors.element_chain_processor import ElementChainProcessor
from models import ElementKind, FooterAction, Screen, ScreenContext
from models.flow_document import (
    FORM_NAME,
    FORM_TYPE,
    LAYOUT_TYPE,
    ComponentNode,
    ScreenDocument,
)


class ScreenProcessor:
    """
    Processor for flow screens.

    This processor turns a screen into its compiled document: a single
    column layout whose form fields are grouped into one Form container, and
    the terminal/success flags derived from the screen's Footer.
    """

    def __init__(self, element_chain_processor: ElementChainProcessor):
        """
        Initialize the screen processor.

        Args:
            element_chain_processor: Element chain processor used to render the screen's elements
        """
        self.element_chain_processor = element_chain_processor
        self.logger = logging.getLogger(__name__)

    def process(self, screen: Screen, context: ScreenContext) -> ScreenDocument:
        """
        Compile a screen.

        Args:
            screen: The screen to compile
            context: Position of the screen within the flow

        Returns:
            The compiled screen document
        """
        document: ScreenDocument = {
            "id": screen.id,
            "title": screen.title,
            "layout": {
                "type": LAYOUT_TYPE,
                "children": self._build_children(screen, context),
            },
        }

        footer = screen.find_footer()
        if footer is not None and footer.action == FooterAction.COMPLETE:
            document["terminal"] = True
            document["success"] = True
        elif screen.terminal or screen.success:
            self.logger.debug(f"Ignoring terminal hint on screen {screen.id} without a completing Footer")

        return document

    def _build_children(self, screen: Screen, context: ScreenContext) -> List[ComponentNode]:
        """
        Render the layout children of a screen.

        Non-form elements become direct children; form fields are wrapped in
        a single Form appended after them. Both groups keep the original
        relative order.
        """
        children: List[ComponentNode] = []
        form_children: List[ComponentNode] = []
        for element in screen.elements:
            node = self.element_chain_processor.process_element(element, context)
            if ElementKind.is_form_field(element.kind):
                form_children.append(node)
            else:
                children.append(node)

        self.logger.debug(
            f"Screen {screen.id}: {len(children)} direct children, {len(form_children)} form fields"
        )
        if form_children:
            children.append({
                "type": FORM_TYPE,
                "name": FORM_NAME,
                "children": form_children,
            })
        return children
