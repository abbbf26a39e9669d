"""
Utility class for inferring the flow's data schema.
"""
import logging
import re
from typing import Dict, List, Sequence

from models.flow_document import DataSchemaEntry
from models.flow_element import ElementKind, Screen

# ${data.<identifier>} inside conditional expressions
DATA_BINDING_PATTERN = re.compile(r"\$\{data\.([A-Za-z_][A-Za-z0-9_]*)\}")

# Selection kinds whose value is a list of option ids
MULTI_SELECT_KINDS = frozenset([ElementKind.CHECKBOX_GROUP])


class DataBindingExtractor:
    """
    Infers a flat data schema from a flow's screens.

    Two passes run over every element of every screen, in screen order then
    element order:

    1. Conditional pass: each distinct ``${data.x}`` in an If condition is
       declared as a boolean. The real runtime type of ``x`` cannot be known
       from the expression, so it is always reported as boolean. Switch
       values are declared as strings the same way.
    2. Named-field pass: every element with a non-empty ``name`` declares
       that name. A later element with the same name overwrites the earlier
       entry; name uniqueness is the editor's concern.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, screens: Sequence[Screen]) -> Dict[str, DataSchemaEntry]:
        """
        Build the data schema for a flow.

        Args:
            screens: Screens of the flow, in order

        Returns:
            Mapping of data key to schema entry; empty if nothing is bound
        """
        schema: Dict[str, DataSchemaEntry] = {}
        self._collect_condition_variables(screens, schema)
        self._collect_named_fields(screens, schema)
        self.logger.debug(f"Extracted {len(schema)} data schema entries")
        return schema

    @staticmethod
    def find_data_variables(expression: str) -> List[str]:
        """
        Find the distinct data variables referenced by an expression.

        Args:
            expression: Text that may contain ``${data.<identifier>}`` tokens

        Returns:
            Identifiers in order of first appearance
        """
        variables: List[str] = []
        for match in DATA_BINDING_PATTERN.finditer(expression or ""):
            if match.group(1) not in variables:
                variables.append(match.group(1))
        return variables

    def _collect_condition_variables(self, screens: Sequence[Screen], schema: Dict[str, DataSchemaEntry]) -> None:
        for screen in screens:
            for element in screen.elements:
                if element.kind == ElementKind.IF:
                    for name in self.find_data_variables(element.condition):
                        if name not in schema:
                            schema[name] = {
                                "type": "boolean",
                                "example": True,
                                "description": "condition variable",
                            }
                elif element.kind == ElementKind.SWITCH:
                    for name in self.find_data_variables(element.value):
                        if name not in schema:
                            schema[name] = {
                                "type": "string",
                                "example": "default_value",
                                "description": "switch value variable",
                            }

    def _collect_named_fields(self, screens: Sequence[Screen], schema: Dict[str, DataSchemaEntry]) -> None:
        for screen in screens:
            for element in screen.elements:
                name = getattr(element, "name", None)
                if not name:
                    continue
                if name in schema:
                    self.logger.debug(f"Data key '{name}' redeclared by {element.kind}({element.id}) on {screen.id}")
                if element.kind in MULTI_SELECT_KINDS:
                    schema[name] = {
                        "type": "array",
                        "example": ["option1"],
                        "description": f"Data from {element.kind} component",
                    }
                else:
                    schema[name] = {
                        "type": "string",
                        "example": "sample_value",
                        "description": f"Data from {element.kind} component",
                    }
