"""Shared fixtures for flow compiler tests."""

import itertools

import pytest

from flow_compiler_service import FlowCompilerService
from flow_validator import FlowValidator
from models import ElementFactory, Screen


@pytest.fixture
def id_generator():
    """Deterministic element ids: el1, el2, ..."""
    counter = itertools.count(1)
    return lambda: f"el{next(counter)}"


@pytest.fixture
def factory(id_generator):
    """Defaults factory with deterministic ids."""
    return ElementFactory(id_generator)


@pytest.fixture
def compiler():
    """Compiler service without file storage use."""
    return FlowCompilerService()


@pytest.fixture
def validator():
    return FlowValidator()


@pytest.fixture
def two_screen_flow():
    """Flow where A collects a name and navigates to B, which completes."""
    return [
        Screen.model_validate({
            "id": "A",
            "title": "Your details",
            "elements": [
                {"id": "h1", "kind": "TextHeading", "text": "Welcome"},
                {"id": "b1", "kind": "TextBody", "text": "Tell us about you"},
                {"id": "i1", "kind": "TextInput", "label": "Name", "name": "name", "required": True},
                {"id": "e1", "kind": "EmailInput", "label": "Email", "name": "email"},
                {"id": "f1", "kind": "Footer", "label": "Next", "action": "navigate", "nextScreen": "B"},
            ],
        }),
        Screen.model_validate({
            "id": "B",
            "title": "Confirm",
            "elements": [
                {"id": "h2", "kind": "TextHeading", "text": "Almost done"},
                {"id": "c1", "kind": "CheckboxGroup", "label": "Interests", "name": "interests",
                 "dataSource": [{"id": "0_a", "title": "A"}, {"id": "1_b", "title": "B"}]},
                {"id": "f2", "kind": "Footer", "label": "Submit", "action": "complete"},
            ],
        }),
    ]


@pytest.fixture
def single_screen_flow():
    """One screen with a heading and a completing Footer."""
    return [
        Screen.model_validate({
            "id": "ONLY",
            "title": "Only",
            "elements": [
                {"id": "h1", "kind": "TextHeading", "text": "Hello"},
                {"id": "f1", "kind": "Footer", "label": "Done", "action": "complete"},
            ],
        }),
    ]
