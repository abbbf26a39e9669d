"""
Utility class for converting compiled documents to the platform's wire keys.
"""
import copy
import json
from typing import Any, Dict, Optional


class WireKeyFormatter:
    """
    Utility class for converting between internal and wire attribute names.

    The compiler emits camelCase attribute names; the platform expects
    hyphenated keys for every multi-word attribute (``helperText`` becomes
    ``helper-text``). The mapping is a fixed dictionary and is applied in
    both directions. Keys of ``payload`` objects, ``routing_model`` and the
    data schema are author-chosen names and are never rewritten.
    """

    # Mapping of internal attribute names to wire keys
    KEY_MAP: Dict[str, str] = {
        'inputType': 'input-type',
        'helperText': 'helper-text',
        'minChars': 'min-chars',
        'maxChars': 'max-chars',
        'initValue': 'init-value',
        'errorMessage': 'error-message',
        'maxLength': 'max-length',
        'dataSource': 'data-source',
        'minSelectedItems': 'min-selected-items',
        'maxSelectedItems': 'max-selected-items',
        'fontWeight': 'font-weight',
        'minDate': 'min-date',
        'maxDate': 'max-date',
        'unavailableDates': 'unavailable-dates',
        'scaleType': 'scale-type',
        'aspectRatio': 'aspect-ratio',
        'altText': 'alt-text',
        'photoSource': 'photo-source',
        'maxFileSizeKb': 'max-file-size-kb',
        'minUploadedPhotos': 'min-uploaded-photos',
        'maxUploadedPhotos': 'max-uploaded-photos',
        'listItems': 'list-items',
        'mainContent': 'main-content',
        'onClickAction': 'on-click-action',
        'leftCaption': 'left-caption',
        'centerCaption': 'center-caption',
        'rightCaption': 'right-caption',
    }

    # Editor-only attributes that are consumed by the compiler and never emitted
    INTERNAL_ONLY_KEYS = frozenset(['nextScreen', 'payloadKeys'])

    # Data schema entry keys
    SCHEMA_KEY_MAP: Dict[str, str] = {
        'example': '__example__',
        'description': '__description__',
    }

    # Objects whose keys are author-chosen names
    OPAQUE_KEYS = frozenset(['payload'])

    @classmethod
    def format_key(cls, key: str) -> str:
        """
        Format an internal attribute name as a wire key.

        Args:
            key: Internal (camelCase) attribute name

        Returns:
            The hyphenated wire key, or the key unchanged if it is one word
        """
        return cls.KEY_MAP.get(key, key)

    @classmethod
    def parse_key(cls, key: str) -> str:
        """
        Parse a wire key back into the internal attribute name.

        Args:
            key: Wire key, e.g. 'helper-text'

        Returns:
            Internal attribute name, e.g. 'helperText'
        """
        return cls._reverse_key_map().get(key, key)

    @classmethod
    def to_wire(cls, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert a compiled flow document to wire naming.

        Args:
            document: Document returned by the compiler

        Returns:
            A new document with hyphenated component keys
        """
        return cls._convert_document(document, cls.KEY_MAP, cls.SCHEMA_KEY_MAP)

    @classmethod
    def from_wire(cls, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert a wire-format document back to internal naming.

        Args:
            document: Document in wire naming

        Returns:
            A new document with camelCase component keys
        """
        schema_keys = {wire: internal for internal, wire in cls.SCHEMA_KEY_MAP.items()}
        return cls._convert_document(document, cls._reverse_key_map(), schema_keys)

    @classmethod
    def dumps(cls, document: Dict[str, Any], indent: Optional[int] = 2) -> str:
        """
        Encode a document as JSON.

        Key order is preserved, so equal documents encode to identical text.
        """
        return json.dumps(document, indent=indent, ensure_ascii=False)

    @classmethod
    def _reverse_key_map(cls) -> Dict[str, str]:
        return {wire: internal for internal, wire in cls.KEY_MAP.items()}

    @classmethod
    def _convert_document(cls, document: Dict[str, Any], key_map: Dict[str, str], schema_key_map: Dict[str, str]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in document.items():
            if key == 'screens':
                result[key] = [cls._convert_node(screen, key_map) for screen in value]
            elif key == 'data':
                result[key] = {
                    name: {schema_key_map.get(entry_key, entry_key): copy.deepcopy(entry_value) for entry_key, entry_value in entry.items()}
                    for name, entry in value.items()
                }
            elif key == 'routing_model':
                result[key] = {screen_id: list(targets) for screen_id, targets in value.items()}
            else:
                result[key] = value
        return result

    @classmethod
    def _convert_node(cls, node: Any, key_map: Dict[str, str]) -> Any:
        if isinstance(node, list):
            return [cls._convert_node(item, key_map) for item in node]
        if not isinstance(node, dict):
            return node

        converted = {}
        for key, value in node.items():
            if key in cls.OPAQUE_KEYS:
                converted[key_map.get(key, key)] = copy.deepcopy(value)
            else:
                converted[key_map.get(key, key)] = cls._convert_node(value, key_map)
        return converted
