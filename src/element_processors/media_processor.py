"""
Processor for image, carousel, date and photo picker elements.
"""
from typing import Any, Dict

from element_processors.base_processor import BaseElementProcessor
from models import BaseElement, ElementKind, ScreenContext

# Runtime defaults emitted for photo pickers that leave them unset
PHOTO_PICKER_DEFAULTS = {
    "photoSource": "camera_gallery",
    "minUploadedPhotos": 0,
    "maxUploadedPhotos": 10,
    "maxFileSizeKb": 10240,
}


class MediaProcessor(BaseElementProcessor):
    """
    Processor for images, image carousels, date pickers and photo pickers.

    Images and carousels are display-only; date and photo pickers are form
    fields and end up inside the Form container.
    """

    kinds = (
        ElementKind.IMAGE,
        ElementKind.IMAGE_CAROUSEL,
        ElementKind.DATE_PICKER,
        ElementKind.PHOTO_PICKER,
    )

    def _process_impl(self, element: BaseElement, context: ScreenContext) -> Dict[str, Any]:
        """
        Render a media or picker element.

        Args:
            element: The element to render
            context: Position of the element's screen within the flow

        Returns:
            Node attributes
        """
        if element.kind == ElementKind.IMAGE:
            attributes: Dict[str, Any] = {"src": element.src}
            attributes.update(self.copy_attributes(
                element, ["width", "height", "scale_type", "aspect_ratio", "alt_text"]
            ))
            return attributes

        if element.kind == ElementKind.IMAGE_CAROUSEL:
            attributes = {"images": self._dump_value(element.images)}
            attributes.update(self.copy_attributes(element, ["aspect_ratio", "scale_type"]))
            return attributes

        if element.kind == ElementKind.DATE_PICKER:
            attributes = {"label": element.label, "name": element.name}
            attributes.update(self.copy_attributes(
                element,
                ["min_date", "max_date", "unavailable_dates", "visible", "helper_text", "enabled", "required"],
            ))
            return attributes

        return self._process_photo_picker(element)

    def _process_photo_picker(self, element: BaseElement) -> Dict[str, Any]:
        """Render a photo picker, filling in the runtime's upload defaults."""
        attributes: Dict[str, Any] = {"name": element.name, "label": element.label}
        uploads = self.copy_attributes(
            element, ["photo_source", "min_uploaded_photos", "max_uploaded_photos", "max_file_size_kb"]
        )
        for key, default in PHOTO_PICKER_DEFAULTS.items():
            attributes[key] = uploads.get(key, default)
        attributes.update(self.copy_attributes(element, ["description", "enabled", "visible", "error_message"]))
        return attributes
