"""
Data models for flow elements, screens and compiled documents.

This module contains the element catalog, the screen graph editor state and
the type definitions used when validating and compiling a flow.
"""

from .element_factory import ElementFactory, generate_element_id
from .errors import FlowCompilerError, InvariantViolationError, UnsupportedKindError
from .flow_document import DataSchemaEntry, FlowDocument, ScreenContext, ScreenDocument
from .flow_element import AnyElement, BaseElement, ElementKind, FooterAction, FooterElement, Screen
from .screen_graph import ScreenGraph
from .validation_result import IssueCode, ValidationIssue, ValidationResult

__all__ = [
    'AnyElement',
    'BaseElement',
    'DataSchemaEntry',
    'ElementFactory',
    'ElementKind',
    'FlowCompilerError',
    'FlowDocument',
    'FooterAction',
    'FooterElement',
    'InvariantViolationError',
    'IssueCode',
    'Screen',
    'ScreenContext',
    'ScreenDocument',
    'ScreenGraph',
    'UnsupportedKindError',
    'ValidationIssue',
    'ValidationResult',
    'generate_element_id',
]
