"""
Content and structural limits enforced by the platform's form runtime.

CONTENT_LIMITS maps each catalog kind to its length-limited attributes
(Python attribute name -> maximum length). Every kind has an entry, even
when it has no limited attribute, so the table covers the whole catalog.
List attributes are limited by item count.
"""
from typing import Dict

from .flow_element import ElementKind

INPUT_LABEL_LIMIT = 40
HELPER_TEXT_LIMIT = 80
DESCRIPTION_LIMIT = 300

CONTENT_LIMITS: Dict[str, Dict[str, int]] = {
    ElementKind.TEXT_HEADING: {"text": 80},
    ElementKind.TEXT_SUBHEADING: {"text": 80},
    ElementKind.TEXT_BODY: {"text": 4096},
    ElementKind.TEXT_CAPTION: {"text": 400},
    ElementKind.RICH_TEXT: {"text": 4096},
    ElementKind.TEXT_INPUT: {"label": INPUT_LABEL_LIMIT, "helper_text": HELPER_TEXT_LIMIT},
    ElementKind.EMAIL_INPUT: {"label": INPUT_LABEL_LIMIT, "helper_text": HELPER_TEXT_LIMIT},
    ElementKind.PHONE_INPUT: {"label": INPUT_LABEL_LIMIT, "helper_text": HELPER_TEXT_LIMIT},
    ElementKind.TEXT_AREA: {"label": INPUT_LABEL_LIMIT, "helper_text": HELPER_TEXT_LIMIT},
    ElementKind.CHECKBOX_GROUP: {"description": DESCRIPTION_LIMIT},
    ElementKind.RADIO_BUTTONS_GROUP: {"description": DESCRIPTION_LIMIT},
    ElementKind.DROPDOWN: {"description": DESCRIPTION_LIMIT},
    ElementKind.OPT_IN: {},
    ElementKind.DATE_PICKER: {},
    ElementKind.IMAGE: {},
    ElementKind.IMAGE_CAROUSEL: {},
    ElementKind.PHOTO_PICKER: {},
    ElementKind.EMBEDDED_LINK: {"text": 25},
    ElementKind.NAVIGATION_LIST: {"list_items": 20},
    ElementKind.FOOTER: {"label": 35},
    ElementKind.IF: {},
    ElementKind.SWITCH: {},
}

# Per-screen counts that only produce warnings
MAX_IMAGES_PER_SCREEN = 3
MAX_EMBEDDED_LINKS_PER_SCREEN = 2

# Flow-level structural limits
MAX_SCREENS = 20
MAX_COMPONENTS_PER_SCREEN = 50
MAX_FORM_COMPONENTS_PER_SCREEN = 20
