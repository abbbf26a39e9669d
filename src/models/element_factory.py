"""
Defaults factory for palette insertion.
"""
import copy
import uuid
from typing import Any, Callable, Dict, Optional

from .errors import UnsupportedKindError
from .flow_element import (
    ELEMENT_MODELS,
    BaseElement,
    ElementKind,
    FooterAction,
    Screen,
)

# Footer target used when the caller does not know the next screen yet
NEXT_SCREEN_SENTINEL = "NEXT_SCREEN"

SCREEN_NAMES = ['FIRST', 'SECOND', 'THIRD', 'FOURTH', 'FIFTH', 'SIXTH', 'SEVENTH', 'EIGHTH', 'NINTH', 'TENTH']

_OPTIONS_A_B = [
    {"id": "0_Option_A", "title": "Option A"},
    {"id": "1_Option_B", "title": "Option B"},
]

# Kind -> default attributes (camelCase, as the editor stores them)
DEFAULT_ATTRIBUTES: Dict[str, Dict[str, Any]] = {
    ElementKind.TEXT_HEADING: {"text": "Text Heading", "visible": True},
    ElementKind.TEXT_SUBHEADING: {"text": "Text subheading", "visible": True},
    ElementKind.TEXT_BODY: {
        "text": "Body text content goes here",
        "fontWeight": "normal",
        "strikethrough": False,
        "visible": True,
        "markdown": False,
    },
    ElementKind.TEXT_CAPTION: {
        "text": "Caption text",
        "fontWeight": "normal",
        "strikethrough": False,
        "visible": True,
        "markdown": False,
    },
    ElementKind.RICH_TEXT: {"text": "# Rich Text\n\nThis is **bold** and *italic* text."},
    ElementKind.TEXT_INPUT: {"label": "Text Input", "name": "text_input", "required": True, "inputType": "text"},
    ElementKind.EMAIL_INPUT: {"label": "Email Address", "name": "email", "required": True},
    ElementKind.PHONE_INPUT: {"label": "Phone Number", "name": "phone", "required": True},
    ElementKind.TEXT_AREA: {"label": "Leave a comment", "name": "Leave_a_comment", "required": False},
    ElementKind.CHECKBOX_GROUP: {
        "label": "Select multiple",
        "name": "checkbox_group",
        "required": False,
        "dataSource": _OPTIONS_A_B,
    },
    ElementKind.RADIO_BUTTONS_GROUP: {
        "label": "Choose one",
        "name": "Choose_one",
        "required": True,
        "options": [{"id": "0_Yes", "title": "Yes"}, {"id": "1_No", "title": "No"}],
    },
    ElementKind.DROPDOWN: {"label": "Select one", "name": "Select_one", "required": True, "options": _OPTIONS_A_B},
    ElementKind.OPT_IN: {"label": "I agree to the terms", "name": "opt_in", "required": True},
    ElementKind.DATE_PICKER: {"label": "Select date", "name": "date_picker", "required": False},
    ElementKind.IMAGE: {"src": "https://example.com/image.png", "altText": "Sample image"},
    ElementKind.IMAGE_CAROUSEL: {
        "images": [
            {"src": "https://example.com/landscape.png", "altText": "Landscape image"},
            {"src": "https://example.com/square.png", "altText": "Square image"},
        ],
    },
    ElementKind.PHOTO_PICKER: {
        "name": "photo_picker",
        "label": "Upload Photos",
        "description": "Select photos from your gallery or take new ones",
        "photoSource": "camera_gallery",
        "maxFileSizeKb": 10240,
        "minUploadedPhotos": 0,
        "maxUploadedPhotos": 10,
    },
    ElementKind.EMBEDDED_LINK: {"text": "Learn more", "url": "https://example.com"},
    ElementKind.NAVIGATION_LIST: {
        "name": "navigation_list",
        "listItems": [{"id": "0_item", "mainContent": {"title": "Item 1", "description": "Description 1"}}],
    },
}


def generate_element_id() -> str:
    """Generate a short random element id (6 hex characters)."""
    return uuid.uuid4().hex[:6]


class ElementFactory:
    """
    Creates elements with kind-specific defaults.

    Ids come from the injected ``id_generator`` so tests can supply a
    deterministic sequence.
    """

    def __init__(self, id_generator: Callable[[], str]):
        """
        Initialize the factory.

        Args:
            id_generator: Callable returning a fresh element id on each call
        """
        self.id_generator = id_generator

    def create_default(self, kind: str, next_screen: Optional[str] = None) -> BaseElement:
        """
        Create an element of the given kind with its default attributes.

        Args:
            kind: Catalog kind of the element
            next_screen: Navigation target for a Footer; ignored for other kinds

        Returns:
            The new element

        Raises:
            UnsupportedKindError: If the kind is not in the catalog
        """
        if not ElementKind.is_valid_kind(kind):
            raise UnsupportedKindError(kind)

        if kind == ElementKind.FOOTER:
            attributes = {
                "label": "Continue",
                "action": FooterAction.NAVIGATE,
                "nextScreen": next_screen or NEXT_SCREEN_SENTINEL,
                "payloadKeys": [],
            }
        elif kind == ElementKind.IF:
            attributes = {
                "condition": "${data.show_content}",
                "then": [self._text_body("Content shown when condition is true")],
                "else": [self._text_body("Content shown when condition is false")],
            }
        elif kind == ElementKind.SWITCH:
            attributes = {
                "value": "${data.user_type}",
                "cases": [
                    {"case": "admin", "elements": [self._text_body("Admin content")]},
                    {"case": "user", "elements": [self._text_body("User content")]},
                ],
                "default": [self._text_body("Default content")],
            }
        else:
            attributes = copy.deepcopy(DEFAULT_ATTRIBUTES[kind])

        return ELEMENT_MODELS[kind].model_validate({"id": self.id_generator(), "kind": kind, **attributes})

    def create_default_screen(self, screen_number: int) -> Screen:
        """
        Create a new screen holding the default heading/body/footer triple.

        Args:
            screen_number: 1-based position of the screen in the flow

        Returns:
            The new screen, completing the flow
        """
        screen_name = self.screen_name(screen_number)
        display_name = screen_name.capitalize()

        heading = self.create_default(ElementKind.TEXT_HEADING)
        heading.text = f"{display_name} Screen Title"
        body = self.create_default(ElementKind.TEXT_BODY)
        body.text = "Add your content here..."
        footer = self.create_default(ElementKind.FOOTER)
        footer.action = FooterAction.COMPLETE
        footer.next_screen = None

        return Screen(
            id=f"{screen_name}_SCREEN",
            title=f"{display_name} Screen",
            elements=[heading, body, footer],
        )

    @staticmethod
    def screen_name(screen_number: int) -> str:
        """
        Get the base name for the n-th screen.

        Args:
            screen_number: 1-based position of the screen

        Returns:
            FIRST..TENTH, then SCREEN_A, SCREEN_B, ...
        """
        if 1 <= screen_number <= len(SCREEN_NAMES):
            return SCREEN_NAMES[screen_number - 1]
        return f"SCREEN_{chr(ord('A') + screen_number - len(SCREEN_NAMES) - 1)}"

    def _text_body(self, text: str) -> Dict[str, Any]:
        attributes = copy.deepcopy(DEFAULT_ATTRIBUTES[ElementKind.TEXT_BODY])
        attributes["text"] = text
        return {"id": self.id_generator(), "kind": ElementKind.TEXT_BODY, **attributes}
