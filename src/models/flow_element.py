"""
Data models for the element catalog and the screen graph.

Every palette component is a pydantic model. The models share a base
identity (``id`` and ``kind``) and are combined into a discriminated union
on ``kind``, so an unknown kind is rejected when a screen is loaded.
Attribute names are snake_case in Python and camelCase (the internal
naming used by the compiler output) as aliases.
"""
from typing import Annotated, Any, Dict, FrozenSet, List, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ElementKind:
    """
    Constants for element kinds.

    This class provides the closed set of catalog kinds and the helpers the
    compiler and validator use to classify them.
    """

    TEXT_HEADING = "TextHeading"
    TEXT_SUBHEADING = "TextSubheading"
    TEXT_BODY = "TextBody"
    TEXT_CAPTION = "TextCaption"
    RICH_TEXT = "RichText"
    TEXT_INPUT = "TextInput"
    EMAIL_INPUT = "EmailInput"
    PHONE_INPUT = "PhoneInput"
    TEXT_AREA = "TextArea"
    CHECKBOX_GROUP = "CheckboxGroup"
    RADIO_BUTTONS_GROUP = "RadioButtonsGroup"
    DROPDOWN = "Dropdown"
    OPT_IN = "OptIn"
    DATE_PICKER = "DatePicker"
    IMAGE = "Image"
    IMAGE_CAROUSEL = "ImageCarousel"
    PHOTO_PICKER = "PhotoPicker"
    EMBEDDED_LINK = "EmbeddedLink"
    NAVIGATION_LIST = "NavigationList"
    FOOTER = "Footer"
    IF = "If"
    SWITCH = "Switch"

    # Kinds that must be wrapped in the screen's Form container
    FORM_FIELD_KINDS: FrozenSet[str] = frozenset([
        TEXT_INPUT,
        EMAIL_INPUT,
        PHONE_INPUT,
        TEXT_AREA,
        CHECKBOX_GROUP,
        RADIO_BUTTONS_GROUP,
        DROPDOWN,
        OPT_IN,
        DATE_PICKER,
        PHOTO_PICKER,
        FOOTER,
    ])

    @classmethod
    def get_all_kinds(cls) -> Tuple[str, ...]:
        """
        Get every catalog kind in palette order.

        Returns:
            Tuple of kind names
        """
        return (
            cls.TEXT_HEADING,
            cls.TEXT_SUBHEADING,
            cls.TEXT_BODY,
            cls.TEXT_CAPTION,
            cls.RICH_TEXT,
            cls.TEXT_INPUT,
            cls.EMAIL_INPUT,
            cls.PHONE_INPUT,
            cls.TEXT_AREA,
            cls.CHECKBOX_GROUP,
            cls.RADIO_BUTTONS_GROUP,
            cls.DROPDOWN,
            cls.OPT_IN,
            cls.DATE_PICKER,
            cls.IMAGE,
            cls.IMAGE_CAROUSEL,
            cls.PHOTO_PICKER,
            cls.EMBEDDED_LINK,
            cls.NAVIGATION_LIST,
            cls.FOOTER,
            cls.IF,
            cls.SWITCH,
        )

    @classmethod
    def is_valid_kind(cls, kind: str) -> bool:
        """
        Check if a given kind is part of the catalog.

        Args:
            kind: The kind to check

        Returns:
            True if the kind is in the catalog, False otherwise
        """
        return kind in cls.get_all_kinds()

    @classmethod
    def is_form_field(cls, kind: str) -> bool:
        """
        Check if elements of a kind belong inside the Form container.

        Args:
            kind: The kind to check

        Returns:
            True for form-field kinds (Footer included), False otherwise
        """
        return kind in cls.FORM_FIELD_KINDS


class FooterAction:
    """Constants for Footer actions."""
    NAVIGATE = "navigate"
    COMPLETE = "complete"


class CatalogModel(BaseModel):
    """Base for every catalog model: camelCase aliases, unknown keys rejected."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


# -----------------------------------------------------------------------------
# Nested value types
# -----------------------------------------------------------------------------


class DataSourceOption(CatalogModel):
    """One selectable option of a selection component."""
    id: str
    title: str
    description: Optional[str] = None
    enabled: Optional[bool] = None


class CarouselImage(CatalogModel):
    src: str
    alt_text: Optional[str] = None


class NavigationItemContent(CatalogModel):
    title: str
    description: Optional[str] = None
    metadata: Optional[str] = None


class NavigationItemStart(CatalogModel):
    image: str
    alt_text: Optional[str] = None


class NavigationItemEnd(CatalogModel):
    title: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[str] = None


class NavigationItem(CatalogModel):
    """A row of a NavigationList, optionally navigating to another screen."""
    id: str
    main_content: NavigationItemContent
    start: Optional[NavigationItemStart] = None
    end: Optional[NavigationItemEnd] = None
    next_screen: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None


# -----------------------------------------------------------------------------
# Elements
# -----------------------------------------------------------------------------


class BaseElement(CatalogModel):
    """Identity shared by every element: an id unique within its screen and a kind."""
    id: str
    kind: str


class TextHeadingElement(BaseElement):
    kind: Literal["TextHeading"] = "TextHeading"
    text: str = ""
    visible: Optional[bool] = None


class TextSubheadingElement(BaseElement):
    kind: Literal["TextSubheading"] = "TextSubheading"
    text: str = ""
    visible: Optional[bool] = None


class TextBodyElement(BaseElement):
    kind: Literal["TextBody"] = "TextBody"
    text: str = ""
    font_weight: Optional[Literal["normal", "bold"]] = None
    strikethrough: Optional[bool] = None
    visible: Optional[bool] = None
    markdown: Optional[bool] = None


class TextCaptionElement(BaseElement):
    kind: Literal["TextCaption"] = "TextCaption"
    text: str = ""
    font_weight: Optional[Literal["normal", "bold"]] = None
    strikethrough: Optional[bool] = None
    visible: Optional[bool] = None
    markdown: Optional[bool] = None


class RichTextElement(BaseElement):
    kind: Literal["RichText"] = "RichText"
    text: str = ""
    visible: Optional[bool] = None


class TextInputElement(BaseElement):
    kind: Literal["TextInput"] = "TextInput"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    input_type: Optional[Literal["text", "number", "email", "password", "passcode", "phone"]] = None
    pattern: Optional[str] = None
    helper_text: Optional[str] = None
    min_chars: Optional[int] = None
    max_chars: Optional[int] = None
    init_value: Optional[str] = None
    error_message: Optional[str] = None


class EmailInputElement(BaseElement):
    kind: Literal["EmailInput"] = "EmailInput"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    helper_text: Optional[str] = None


class PhoneInputElement(BaseElement):
    kind: Literal["PhoneInput"] = "PhoneInput"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    helper_text: Optional[str] = None


class TextAreaElement(BaseElement):
    kind: Literal["TextArea"] = "TextArea"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    max_length: Optional[int] = None
    helper_text: Optional[str] = None
    enabled: Optional[bool] = None
    init_value: Optional[str] = None
    error_message: Optional[str] = None


class CheckboxGroupElement(BaseElement):
    kind: Literal["CheckboxGroup"] = "CheckboxGroup"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    data_source: List[DataSourceOption] = Field(default_factory=list)
    min_selected_items: Optional[int] = None
    max_selected_items: Optional[int] = None
    enabled: Optional[bool] = None
    visible: Optional[bool] = None
    description: Optional[str] = None


class RadioButtonsGroupElement(BaseElement):
    kind: Literal["RadioButtonsGroup"] = "RadioButtonsGroup"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    options: List[DataSourceOption] = Field(default_factory=list)
    description: Optional[str] = None
    enabled: Optional[bool] = None
    visible: Optional[bool] = None


class DropdownElement(BaseElement):
    kind: Literal["Dropdown"] = "Dropdown"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    options: List[DataSourceOption] = Field(default_factory=list)
    description: Optional[str] = None
    enabled: Optional[bool] = None
    visible: Optional[bool] = None


class OptInElement(BaseElement):
    kind: Literal["OptIn"] = "OptIn"
    label: str = ""
    name: str = ""
    required: Optional[bool] = None
    visible: Optional[bool] = None


class DatePickerElement(BaseElement):
    kind: Literal["DatePicker"] = "DatePicker"
    label: str = ""
    name: str = ""
    min_date: Optional[str] = None
    max_date: Optional[str] = None
    unavailable_dates: Optional[List[str]] = None
    helper_text: Optional[str] = None
    enabled: Optional[bool] = None
    visible: Optional[bool] = None
    required: Optional[bool] = None


class ImageElement(BaseElement):
    kind: Literal["Image"] = "Image"
    src: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    scale_type: Optional[Literal["cover", "contain"]] = None
    aspect_ratio: Optional[str] = None
    alt_text: Optional[str] = None


class ImageCarouselElement(BaseElement):
    kind: Literal["ImageCarousel"] = "ImageCarousel"
    images: List[CarouselImage] = Field(default_factory=list)
    aspect_ratio: Optional[str] = None
    scale_type: Optional[Literal["cover", "contain"]] = None


class PhotoPickerElement(BaseElement):
    kind: Literal["PhotoPicker"] = "PhotoPicker"
    name: str = ""
    label: str = ""
    description: Optional[str] = None
    photo_source: Optional[Literal["camera_gallery", "camera", "gallery"]] = None
    max_file_size_kb: Optional[int] = None
    min_uploaded_photos: Optional[int] = None
    max_uploaded_photos: Optional[int] = None
    enabled: Optional[bool] = None
    visible: Optional[bool] = None
    error_message: Optional[Union[str, Dict[str, str]]] = None


class EmbeddedLinkElement(BaseElement):
    kind: Literal["EmbeddedLink"] = "EmbeddedLink"
    text: str = ""
    url: Optional[str] = None
    visible: Optional[bool] = None


class NavigationListElement(BaseElement):
    kind: Literal["NavigationList"] = "NavigationList"
    name: str = ""
    label: Optional[str] = None
    description: Optional[str] = None
    list_items: List[NavigationItem] = Field(default_factory=list)


class FooterElement(BaseElement):
    """
    The distinguished navigation element of a screen.

    ``next_screen`` is only meaningful when ``action`` is ``navigate``.
    """
    kind: Literal["Footer"] = "Footer"
    label: str = ""
    action: Literal["navigate", "complete"] = FooterAction.NAVIGATE
    next_screen: Optional[str] = None
    payload_keys: List[str] = Field(default_factory=list)
    left_caption: Optional[str] = None
    center_caption: Optional[str] = None
    right_caption: Optional[str] = None
    enabled: Optional[bool] = None


class IfElement(BaseElement):
    """Conditional branch rendered by the runtime from a ``${data.x}`` condition."""
    kind: Literal["If"] = "If"
    condition: str = ""
    then: List["AnyElement"] = Field(default_factory=list)
    else_: List["AnyElement"] = Field(default_factory=list, alias="else")
    visible: Optional[bool] = None


class SwitchCase(CatalogModel):
    case: str
    elements: List["AnyElement"] = Field(default_factory=list)


class SwitchElement(BaseElement):
    kind: Literal["Switch"] = "Switch"
    value: str = ""
    cases: List[SwitchCase] = Field(default_factory=list)
    default: List["AnyElement"] = Field(default_factory=list)
    visible: Optional[bool] = None


AnyElement = Annotated[
    Union[
        TextHeadingElement,
        TextSubheadingElement,
        TextBodyElement,
        TextCaptionElement,
        RichTextElement,
        TextInputElement,
        EmailInputElement,
        PhoneInputElement,
        TextAreaElement,
        CheckboxGroupElement,
        RadioButtonsGroupElement,
        DropdownElement,
        OptInElement,
        DatePickerElement,
        ImageElement,
        ImageCarouselElement,
        PhotoPickerElement,
        EmbeddedLinkElement,
        NavigationListElement,
        FooterElement,
        IfElement,
        SwitchElement,
    ],
    Field(discriminator="kind"),
]


# Kind -> model class, used by the defaults factory
ELEMENT_MODELS: Dict[str, Type[BaseElement]] = {
    model.model_fields["kind"].default: model
    for model in (
        TextHeadingElement,
        TextSubheadingElement,
        TextBodyElement,
        TextCaptionElement,
        RichTextElement,
        TextInputElement,
        EmailInputElement,
        PhoneInputElement,
        TextAreaElement,
        CheckboxGroupElement,
        RadioButtonsGroupElement,
        DropdownElement,
        OptInElement,
        DatePickerElement,
        ImageElement,
        ImageCarouselElement,
        PhotoPickerElement,
        EmbeddedLinkElement,
        NavigationListElement,
        FooterElement,
        IfElement,
        SwitchElement,
    )
}


class Screen(CatalogModel):
    """
    One page of the flow.

    ``terminal`` and ``success`` are editor hints only; the compiler derives
    the emitted flags from the Footer.
    """
    id: str
    title: str = ""
    terminal: Optional[bool] = None
    success: Optional[bool] = None
    elements: List[AnyElement]

    def find_footer(self) -> Optional[FooterElement]:
        """
        Get the Footer of this screen.

        Returns:
            The first Footer element, or None if the screen has none
        """
        for element in self.elements:
            if element.kind == ElementKind.FOOTER:
                return element
        return None


IfElement.model_rebuild()
SwitchCase.model_rebuild()
SwitchElement.model_rebuild()
Screen.model_rebuild()
