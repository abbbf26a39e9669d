"""Tests for content and structural limit validation."""

from models import IssueCode, Screen
from models.flow_element import (
    EmbeddedLinkElement,
    FooterElement,
    ImageElement,
    NavigationItem,
    NavigationListElement,
    TextHeadingElement,
    TextInputElement,
)


def images(count):
    return [ImageElement(id=f"img{i}", src="https://example.com/a.png") for i in range(count)]


def links(count):
    return [EmbeddedLinkElement(id=f"lnk{i}", text="Docs", url="https://example.com") for i in range(count)]


class TestValidateElement:
    """Tests for per-element length limits."""

    def test_heading_over_limit(self, validator):
        """81 characters on a heading give one error with limit and current."""
        result = validator.validate_element(TextHeadingElement(id="h", text="x" * 81))

        assert not result.is_valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == IssueCode.CONTENT_LIMIT_EXCEEDED
        assert error.limit == 80
        assert error.current == 81
        assert error.field == "text"
        assert error.element_id == "h"
        assert result.warnings == []

    def test_heading_at_limit(self, validator):
        result = validator.validate_element(TextHeadingElement(id="h", text="x" * 80))

        assert result.is_valid
        assert result.errors == []

    def test_empty_fields_never_error(self, validator):
        result = validator.validate_element(TextInputElement(id="i"))

        assert result.is_valid

    def test_each_field_reported(self, validator):
        """Label and helper text are checked independently."""
        element = TextInputElement(id="i", label="l" * 41, name="n", helper_text="h" * 81)

        result = validator.validate_element(element)

        assert [error.field for error in result.errors] == ["label", "helperText"]
        assert [error.limit for error in result.errors] == [40, 80]

    def test_footer_label(self, validator):
        result = validator.validate_element(FooterElement(id="f", label="x" * 36))

        assert result.errors[0].limit == 35
        assert result.errors[0].current == 36

    def test_navigation_list_item_count(self, validator):
        items = [NavigationItem(id=str(i), main_content={"title": f"Item {i}"}) for i in range(21)]
        element = NavigationListElement(id="n", name="menu", list_items=items)

        result = validator.validate_element(element)

        assert result.errors[0].field == "listItems"
        assert result.errors[0].current == 21
        assert "items" in result.errors[0].message

    def test_custom_limit_table(self):
        from flow_validator import FlowValidator

        validator = FlowValidator({"TextHeading": {"text": 5}})

        assert not validator.validate_element(TextHeadingElement(id="h", text="toolong")).is_valid
        assert validator.validate_element(TextInputElement(id="i", label="x" * 100)).is_valid


class TestValidateScreen:
    """Tests for per-screen counts."""

    def test_too_many_images_warns(self, validator):
        result = validator.validate_screen(Screen(id="s", elements=images(4)))

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "4/3" in result.warnings[0].message
        assert result.warnings[0].code == IssueCode.COUNT_LIMIT_EXCEEDED

    def test_three_images_are_fine(self, validator):
        result = validator.validate_screen(Screen(id="s", elements=images(3)))

        assert result.warnings == []

    def test_too_many_links_warns(self, validator):
        result = validator.validate_screen(Screen(id="s", elements=links(3)))

        assert len(result.warnings) == 1
        assert "3/2" in result.warnings[0].message

    def test_element_errors_are_collected(self, validator):
        screen = Screen(id="s", elements=[
            TextHeadingElement(id="h1", text="x" * 81),
            TextHeadingElement(id="h2", text="ok"),
            TextHeadingElement(id="h3", text="y" * 90),
        ])

        result = validator.validate_screen(screen)

        assert not result.is_valid
        assert [error.element_id for error in result.errors] == ["h1", "h3"]

    def test_result_serializes_with_camel_case(self, validator):
        result = validator.validate_screen(Screen(id="s", elements=[TextHeadingElement(id="h", text="x" * 81)]))

        dumped = result.model_dump(by_alias=True)

        assert dumped["isValid"] is False
        assert dumped["errors"][0]["elementId"] == "h"


class TestValidateFlow:
    """Tests for flow-level structural limits."""

    def test_too_many_screens(self, validator):
        screens = [Screen(id=f"S{i}", title=f"S{i}", elements=[]) for i in range(21)]

        result = validator.validate_flow(screens)

        assert not result.is_valid
        assert "21/20" in result.errors[0].message

    def test_too_many_components(self, validator):
        elements = [TextHeadingElement(id=f"h{i}", text="x") for i in range(51)]

        result = validator.validate_flow([Screen(id="s", title="Busy", elements=elements)])

        assert len(result.errors) == 1
        assert result.errors[0].message.startswith('Screen "Busy": ')
        assert "51/50" in result.errors[0].message

    def test_too_many_inputs(self, validator):
        """The Footer is not counted as an input."""
        elements = [TextInputElement(id=f"i{i}", label="L", name=f"n{i}") for i in range(20)]
        elements.append(FooterElement(id="f", label="Done", action="complete"))

        assert validator.validate_flow([Screen(id="s", title="Form", elements=elements)]).is_valid

        elements.insert(0, TextInputElement(id="extra", label="L", name="extra"))
        result = validator.validate_flow([Screen(id="s", title="Form", elements=elements)])

        assert "21/20" in result.errors[0].message

    def test_screen_messages_are_prefixed(self, validator):
        screens = [
            Screen(id="a", title="Intro", elements=[TextHeadingElement(id="h", text="x" * 81)]),
            Screen(id="b", title="Gallery", elements=images(4)),
        ]

        result = validator.validate_flow(screens)

        assert result.errors[0].message.startswith('Screen "Intro": ')
        assert result.warnings[0].message.startswith('Screen "Gallery": ')

    def test_dangling_navigation_is_not_checked(self, validator):
        footer = FooterElement(id="f", label="Go", next_screen="NOWHERE")

        assert validator.validate_flow([Screen(id="a", title="A", elements=[footer])]).is_valid

    def test_service_validate(self, compiler, two_screen_flow):
        assert compiler.validate(two_screen_flow).is_valid
