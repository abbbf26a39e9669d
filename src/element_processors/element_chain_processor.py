"""
Processor for rendering element lists.

This module provides the ElementChainProcessor class which dispatches each
element of a list to the processor registered for its kind. It is shared by
the screen processor and by processors of elements that nest further
element lists (If and Switch branches).
"""
import logging
from typing import Dict, List, Sequence

from element_processors.base_processor import BaseElementProcessor, ElementProcessingError
from models import BaseElement, ScreenContext, UnsupportedKindError
from models.flow_document import ComponentNode


class ElementChainProcessor:
    """
    Handles rendering of element lists.

    The processor registry is keyed by element kind:
    {
        'TextHeading': TextProcessor,
        'Footer': FooterProcessor,
        ...
    }
    It may be filled in after construction, since processors of nested
    elements need a reference to this chain processor themselves.
    """

    def __init__(self, processors: Dict[str, BaseElementProcessor]):
        """
        Initialize the ElementChainProcessor.

        Args:
            processors: Dictionary mapping element kinds to their processors
        """
        self.processors = processors
        self.logger = logging.getLogger(__name__)
        self.logger.debug("Initialized ElementChainProcessor")

    def process_element(self, element: BaseElement, context: ScreenContext) -> ComponentNode:
        """
        Render a single element with the processor registered for its kind.

        Args:
            element: The element to render
            context: Position of the element's screen within the flow

        Returns:
            The rendered component node

        Raises:
            UnsupportedKindError: If no processor handles the element's kind
            ElementProcessingError: If the processor fails on the element
        """
        processor = self.processors.get(element.kind)
        if processor is None:
            raise UnsupportedKindError(element.kind)

        self.logger.debug(f"Processing {element.kind} element {element.id}")
        try:
            return processor.process(element, context)
        except ElementProcessingError as e:
            if e.screen_id is None:
                raise ElementProcessingError(e.element_name, e.message, context.screen.id) from e
            raise
        except (AttributeError, KeyError, TypeError) as e:
            raise ElementProcessingError(
                processor.get_element_name(element), str(e), context.screen.id
            ) from e

    def process_chain(self, elements: Sequence[BaseElement], context: ScreenContext) -> List[ComponentNode]:
        """
        Render a list of elements, preserving their order.

        Args:
            elements: The elements to render
            context: Position of the elements' screen within the flow

        Returns:
            The rendered component nodes
        """
        return [self.process_element(element, context) for element in elements]
