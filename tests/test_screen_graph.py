"""Tests for the editor's screen graph."""

import pytest

from models import (
    ElementKind,
    FooterAction,
    FooterElement,
    InvariantViolationError,
    ScreenGraph,
    UnsupportedKindError,
)


@pytest.fixture
def graph(factory):
    """Graph holding the single default screen."""
    return ScreenGraph(factory)


class TestScreens:
    """Tests for screen operations."""

    def test_starts_with_one_selected_screen(self, graph):
        assert [screen.id for screen in graph.screens] == ["FIRST_SCREEN"]
        assert graph.selected_screen_id == "FIRST_SCREEN"

    def test_add_screen_repoints_completing_footer(self, graph):
        """The previous last screen now navigates to the new one."""
        new_screen = graph.add_screen()

        first_footer = graph.screens[0].find_footer()
        assert new_screen.id == "SECOND_SCREEN"
        assert first_footer.action == FooterAction.NAVIGATE
        assert first_footer.next_screen == "SECOND_SCREEN"
        assert new_screen.find_footer().action == FooterAction.COMPLETE

    def test_add_after_remove_keeps_ids_unique(self, graph, compiler):
        """A new screen reuses the first free default id."""
        graph.add_screen()
        graph.add_screen()
        graph.remove_screen("SECOND_SCREEN")

        new_screen = graph.add_screen()

        ids = [screen.id for screen in graph.screens]
        assert new_screen.id == "SECOND_SCREEN"
        assert len(set(ids)) == len(ids) == 3
        assert graph.get_screen("THIRD_SCREEN").find_footer().next_screen == "SECOND_SCREEN"

        routing_model = compiler.compile(graph.snapshot())["routing_model"]
        assert set(routing_model) == set(ids)

    def test_rename_to_used_id_is_rejected(self, graph):
        graph.add_screen()

        with pytest.raises(InvariantViolationError):
            graph.update_screen("SECOND_SCREEN", id="FIRST_SCREEN")

        assert [screen.id for screen in graph.screens] == ["FIRST_SCREEN", "SECOND_SCREEN"]

    def test_rename_to_same_id_is_allowed(self, graph):
        graph.update_screen("FIRST_SCREEN", id="FIRST_SCREEN", title="Start")

        assert graph.get_screen("FIRST_SCREEN").title == "Start"

    def test_cannot_remove_last_screen(self, graph):
        assert graph.remove_screen("FIRST_SCREEN") is False
        assert len(graph.screens) == 1

    def test_remove_selected_screen_moves_selection(self, graph):
        graph.add_screen()
        graph.select_screen("SECOND_SCREEN")

        assert graph.remove_screen("SECOND_SCREEN") is True
        assert graph.selected_screen_id == "FIRST_SCREEN"

    def test_rename_keeps_selection(self, graph):
        graph.update_screen("FIRST_SCREEN", id="WELCOME", title="Welcome")

        assert graph.selected_screen_id == "WELCOME"
        assert graph.get_screen("WELCOME").title == "Welcome"

    def test_unknown_screen(self, graph):
        with pytest.raises(InvariantViolationError):
            graph.select_screen("NOPE")

    def test_snapshot_is_independent(self, graph):
        snapshot = graph.snapshot()
        graph.screens[0].elements[0].text = "Changed"

        assert snapshot[0].elements[0].text == "First Screen Title"


class TestElements:
    """Tests for element operations."""

    def test_add_element(self, graph):
        element = graph.add_element("FIRST_SCREEN", ElementKind.TEXT_INPUT)

        assert graph.screens[0].elements[-1] is element

    def test_second_footer_is_rejected(self, graph):
        with pytest.raises(InvariantViolationError):
            graph.add_element("FIRST_SCREEN", ElementKind.FOOTER)

    def test_unknown_kind_is_rejected(self, graph):
        with pytest.raises(UnsupportedKindError):
            graph.add_element("FIRST_SCREEN", "Hologram")

    def test_move_element(self, graph):
        kinds_before = [element.kind for element in graph.screens[0].elements]

        graph.move_element("FIRST_SCREEN", 0, 2)

        kinds_after = [element.kind for element in graph.screens[0].elements]
        assert kinds_after == kinds_before[1:] + kinds_before[:1]

    def test_move_out_of_range(self, graph):
        with pytest.raises(InvariantViolationError):
            graph.move_element("FIRST_SCREEN", 5, 0)

    def test_remove_element(self, graph):
        heading_id = graph.screens[0].elements[0].id

        graph.remove_element("FIRST_SCREEN", heading_id)

        assert all(element.id != heading_id for element in graph.screens[0].elements)

    def test_update_element(self, graph):
        heading = graph.screens[0].elements[0].model_copy(update={"text": "New title"})

        graph.update_element("FIRST_SCREEN", heading)

        assert graph.screens[0].elements[0].text == "New title"

    def test_update_cannot_add_second_footer(self, graph):
        """Replacing a body with a Footer is rejected when the screen has one."""
        body = graph.screens[0].elements[1]

        with pytest.raises(InvariantViolationError):
            graph.update_element("FIRST_SCREEN", FooterElement(id=body.id, label="Again", action="complete"))

        footers = [element for element in graph.screens[0].elements if element.kind == ElementKind.FOOTER]
        assert len(footers) == 1
        assert graph.screens[0].elements[1] is body

    def test_update_existing_footer(self, graph):
        footer = graph.screens[0].find_footer().model_copy(update={"label": "Finish"})

        graph.update_element("FIRST_SCREEN", footer)

        assert graph.screens[0].find_footer().label == "Finish"

    def test_duplicate_element(self, graph):
        original = graph.add_element("FIRST_SCREEN", ElementKind.TEXT_INPUT)

        duplicate = graph.duplicate_element("FIRST_SCREEN", original.id)

        elements = graph.screens[0].elements
        assert elements[elements.index(original) + 1] is duplicate
        assert duplicate.id != original.id
        assert duplicate.name == "text_input_copy"
        assert duplicate.label == "Text Input (Copy)"

    def test_footer_cannot_be_duplicated(self, graph):
        footer_id = graph.screens[0].find_footer().id

        with pytest.raises(InvariantViolationError):
            graph.duplicate_element("FIRST_SCREEN", footer_id)

    def test_graph_compiles(self, graph, compiler):
        graph.add_element("FIRST_SCREEN", ElementKind.TEXT_INPUT)
        graph.add_screen()

        document = compiler.compile(graph.snapshot())

        assert document["routing_model"] == {"FIRST_SCREEN": ["SECOND_SCREEN"], "SECOND_SCREEN": []}
        assert document["data"]["text_input"]["type"] == "string"
