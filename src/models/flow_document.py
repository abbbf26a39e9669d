"""
Type definitions for the compiled flow document.

The compiler emits plain dictionaries so the output can be compared, cached
and JSON-encoded directly. The TypedDicts below describe their shape in the
internal (camelCase) naming; hyphenated wire keys are produced later by the
wire formatter.
"""
from typing import Any, Dict, List, NamedTuple, NotRequired, Sequence, TypedDict

from .flow_element import Screen

# Fixed platform constants
FLOW_JSON_VERSION = "7.3"
DATA_API_VERSION = "4.0"
LAYOUT_TYPE = "SingleColumnLayout"
FORM_TYPE = "Form"
FORM_NAME = "flow_path"

# A rendered component in internal naming: {"type": ..., <attributes>}
ComponentNode = Dict[str, Any]


class DataSchemaEntry(TypedDict):
    """Inferred schema of one data-binding key."""
    type: str
    example: Any
    description: str


class FormNode(TypedDict):
    type: str
    name: str
    children: List[ComponentNode]


class LayoutDocument(TypedDict):
    type: str
    children: List[ComponentNode]


class ScreenDocument(TypedDict):
    """
    Type definition for one compiled screen.

    ``terminal`` and ``success`` are only present on screens whose Footer
    completes the flow.
    """
    id: str
    title: str
    layout: LayoutDocument
    terminal: NotRequired[bool]
    success: NotRequired[bool]


class FlowDocument(TypedDict):
    """
    Type definition for the compiled flow.

    ``routing_model`` is only present for flows with more than one screen,
    ``data`` only when the inferred schema is non-empty.
    """
    version: str
    data_api_version: str
    screens: List[ScreenDocument]
    routing_model: NotRequired[Dict[str, List[str]]]
    data: NotRequired[Dict[str, DataSchemaEntry]]


class ScreenContext(NamedTuple):
    """Position of the screen being compiled within the whole flow."""
    screen: Screen
    screen_index: int
    screens: Sequence[Screen]

    @property
    def previous_screens(self) -> Sequence[Screen]:
        return self.screens[:self.screen_index]
