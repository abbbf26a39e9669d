"""
Base processor class for flow element rendering.
"""
import copy
from typing import Any, Dict, Iterable, Optional, Tuple

from models import BaseElement, InvariantViolationError, ScreenContext
from models.flow_document import ComponentNode


class BaseElementProcessor:
    """
    Abstract base class for all element processors.

    This class defines the interface and common functionality that all element
    processors must implement. Each processor is responsible for rendering the
    element kinds listed in ``kinds`` into component nodes of the compiled
    document, using the internal (camelCase) attribute naming.
    """

    # Catalog kinds handled by this processor
    kinds: Tuple[str, ...] = ()

    def process(self, element: BaseElement, context: ScreenContext) -> ComponentNode:
        """
        Render an element into a component node.

        Args:
            element: The element to render
            context: Position of the element's screen within the flow

        Returns:
            The component node, starting with its ``type``

        Raises:
            ElementProcessingError: If the element cannot be rendered
        """
        node: ComponentNode = {"type": self.get_component_type(element)}
        node.update(self._process_impl(element, context))
        return node

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Implementation of element rendering. Subclasses must override this method.

        Args:
            element: The element to render
            context: Position of the element's screen within the flow

        Returns:
            The node attributes other than ``type``
        """
        raise NotImplementedError("Subclasses must implement _process_impl()")

    def get_component_type(self, element: BaseElement) -> str:
        """
        Get the runtime component type for an element.

        Most kinds render as a component of the same name; subclasses override
        this for kinds that are variants of another runtime component.
        """
        return element.kind

    def copy_attributes(self, element: BaseElement, attributes: Iterable[str]) -> Dict[str, Any]:
        """
        Copy the set attributes of an element, keyed by their camelCase alias.

        Unset values (None, empty strings and empty lists) are left out;
        ``False`` and ``0`` are kept.

        Args:
            element: The element to read from
            attributes: Python attribute names to copy, in output order

        Returns:
            Dictionary of alias to value
        """
        copied: Dict[str, Any] = {}
        for attribute in attributes:
            value = getattr(element, attribute)
            if self._is_unset(value):
                continue
            alias = type(element).model_fields[attribute].alias or attribute
            copied[alias] = self._dump_value(value)
        return copied

    def get_element_name(self, element: BaseElement) -> str:
        """
        Get a readable name for an element, for logs and error messages.

        Returns:
            The element's ``name`` if it has one, else ``Kind(id)``
        """
        name = getattr(element, "name", None)
        return name if name else f"{element.kind}({element.id})"

    @staticmethod
    def _is_unset(value: Any) -> bool:
        return value is None or value == "" or value == [] or value == {}

    @classmethod
    def _dump_value(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [cls._dump_value(item) for item in value]
        if hasattr(value, "model_dump"):
            return value.model_dump(by_alias=True, exclude_none=True)
        if isinstance(value, dict):
            return copy.deepcopy(value)
        return value


class ElementProcessingError(InvariantViolationError):
    """
    Exception raised when rendering an element fails.

    This exception should be raised when a processor encounters an element
    that violates an invariant it relies on.
    """

    def __init__(self, element_name: str, message: str, screen_id: Optional[str] = None):
        """
        Initialize the error.

        Args:
            element_name: The name of the element that failed to render
            message: A description of what went wrong
            screen_id: Id of the screen holding the element, when known
        """
        self.element_name = element_name
        self.message = message
        self.screen_id = screen_id
        location = f" on screen '{screen_id}'" if screen_id else ""
        super().__init__(f"Error processing element '{element_name}'{location}: {message}")
