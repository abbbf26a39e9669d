"""
In-memory editor state for the screen graph.

ScreenGraph owns the ordered screens and the active-screen selection and
applies the palette and property-editor operations to them. The validator
and compiler never see this object; they receive ``snapshot()`` copies.
"""
import logging
from typing import List, Optional

from .element_factory import ElementFactory
from .errors import InvariantViolationError
from .flow_element import BaseElement, ElementKind, FooterAction, Screen


class ScreenGraph:
    """
    Ordered screens of one flow plus the selected screen.

    A new graph starts with a single default screen. Operations that name an
    unknown screen or element raise InvariantViolationError.
    """

    def __init__(self, factory: ElementFactory, screens: Optional[List[Screen]] = None):
        """
        Initialize the screen graph.

        Args:
            factory: Defaults factory used for new screens and elements
            screens: Initial screens; a default screen is created when omitted
        """
        self.factory = factory
        self.screens: List[Screen] = list(screens) if screens else [factory.create_default_screen(1)]
        self.selected_screen_id: Optional[str] = self.screens[0].id
        self.logger = logging.getLogger(__name__)

    def snapshot(self) -> List[Screen]:
        """
        Get a deep copy of the screens for the validator or compiler.

        Returns:
            Independent copies of all screens in order
        """
        return [screen.model_copy(deep=True) for screen in self.screens]

    def get_screen(self, screen_id: str) -> Screen:
        for screen in self.screens:
            if screen.id == screen_id:
                return screen
        raise InvariantViolationError(f"Unknown screen '{screen_id}'")

    # ------------------------------------------------------------------
    # Screen operations
    # ------------------------------------------------------------------

    def add_screen(self) -> Screen:
        """
        Append a new default screen.

        The new screen takes the first default id not used by another
        screen. Every screen whose Footer completed the flow is switched to
        navigate to the new screen, so the new screen becomes the end of the
        flow.

        Returns:
            The new screen
        """
        new_screen = self.factory.create_default_screen(self._next_screen_number())
        for screen in self.screens:
            footer = screen.find_footer()
            if footer is not None and footer.action == FooterAction.COMPLETE:
                footer.action = FooterAction.NAVIGATE
                footer.next_screen = new_screen.id
                self.logger.debug(f"Re-pointed footer of {screen.id} to {new_screen.id}")
        self.screens.append(new_screen)
        return new_screen

    def remove_screen(self, screen_id: str) -> bool:
        """
        Remove a screen unless it is the last one.

        Args:
            screen_id: Id of the screen to remove

        Returns:
            True if the screen was removed, False if it was the only screen
        """
        screen = self.get_screen(screen_id)
        if len(self.screens) <= 1:
            return False
        self.screens.remove(screen)
        if self.selected_screen_id == screen_id:
            self.selected_screen_id = self.screens[0].id
        return True

    def update_screen(self, screen_id: str, **updates) -> Screen:
        """
        Update screen attributes such as ``id``, ``title`` or ``terminal``.

        Renaming the selected screen keeps it selected.

        Raises:
            InvariantViolationError: If the new id is used by another screen
        """
        screen = self.get_screen(screen_id)
        new_id = updates.get("id", screen_id)
        if new_id != screen_id and any(other.id == new_id for other in self.screens):
            raise InvariantViolationError(f"Screen id '{new_id}' is already used")
        for attribute, value in updates.items():
            setattr(screen, attribute, value)
        if "id" in updates and self.selected_screen_id == screen_id:
            self.selected_screen_id = updates["id"]
        return screen

    def select_screen(self, screen_id: str) -> None:
        self.selected_screen_id = self.get_screen(screen_id).id

    # ------------------------------------------------------------------
    # Element operations
    # ------------------------------------------------------------------

    def add_element(self, screen_id: str, kind: str, next_screen: Optional[str] = None) -> BaseElement:
        """
        Append a default element of the given kind to a screen.

        Args:
            screen_id: Id of the target screen
            kind: Catalog kind of the new element
            next_screen: Navigation target when adding a Footer

        Returns:
            The new element

        Raises:
            UnsupportedKindError: If the kind is not in the catalog
            InvariantViolationError: If a second Footer would be added
        """
        screen = self.get_screen(screen_id)
        if kind == ElementKind.FOOTER:
            self._ensure_no_footer(screen)
        element = self.factory.create_default(kind, next_screen=next_screen)
        screen.elements.append(element)
        return element

    def update_element(self, screen_id: str, element: BaseElement) -> None:
        """
        Replace the element with the same id.

        Raises:
            InvariantViolationError: If the update would give the screen a second Footer
        """
        screen = self.get_screen(screen_id)
        index = self._index_of(screen, element.id)
        footer = screen.find_footer()
        if element.kind == ElementKind.FOOTER and footer is not None and footer.id != element.id:
            raise InvariantViolationError(f"Screen '{screen_id}' can only have one Footer")
        screen.elements[index] = element

    def remove_element(self, screen_id: str, element_id: str) -> None:
        screen = self.get_screen(screen_id)
        screen.elements = [element for element in screen.elements if element.id != element_id]

    def move_element(self, screen_id: str, from_index: int, to_index: int) -> None:
        """
        Move an element by index-splice.

        Args:
            screen_id: Id of the screen
            from_index: Current position of the element
            to_index: Position of the element after the move
        """
        screen = self.get_screen(screen_id)
        if not 0 <= from_index < len(screen.elements):
            raise InvariantViolationError(f"Element index {from_index} out of range on screen '{screen_id}'")
        element = screen.elements.pop(from_index)
        screen.elements.insert(to_index, element)
        self.logger.debug(f"Moved {element.kind}({element.id}) from {from_index} to {to_index} on {screen_id}")

    def duplicate_element(self, screen_id: str, element_id: str) -> BaseElement:
        """
        Insert a copy of an element right after the original.

        The copy gets a fresh id; its ``name`` gets a ``_copy`` suffix so the
        data binding keys stay distinct, and its label a ``(Copy)`` suffix.

        Raises:
            InvariantViolationError: If the element is the screen's Footer
        """
        screen = self.get_screen(screen_id)
        index = self._index_of(screen, element_id)
        original = screen.elements[index]
        if original.kind == ElementKind.FOOTER:
            raise InvariantViolationError(f"Screen '{screen_id}' can only have one Footer")

        updates = {"id": self.factory.id_generator()}
        if getattr(original, "name", None):
            updates["name"] = f"{original.name}_copy"
        if getattr(original, "label", None):
            updates["label"] = f"{original.label} (Copy)"
        duplicate = original.model_copy(deep=True, update=updates)
        screen.elements.insert(index + 1, duplicate)
        return duplicate

    def _index_of(self, screen: Screen, element_id: str) -> int:
        for index, element in enumerate(screen.elements):
            if element.id == element_id:
                return index
        raise InvariantViolationError(f"Unknown element '{element_id}' on screen '{screen.id}'")

    def _next_screen_number(self) -> int:
        used = {screen.id for screen in self.screens}
        number = 1
        while f"{self.factory.screen_name(number)}_SCREEN" in used:
            number += 1
        return number

    def _ensure_no_footer(self, screen: Screen) -> None:
        if screen.find_footer() is not None:
            raise InvariantViolationError(f"Screen '{screen.id}' can only have one Footer")
