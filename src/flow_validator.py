"""
Content and structural limit checks for flows.

The validator runs on every edit, so it reports problems as structured
results and never raises.
"""
import logging
from typing import Dict, Optional, Sequence

from models import BaseElement, ElementKind, IssueCode, Screen, ValidationIssue, ValidationResult
from models.content_limits import (
    CONTENT_LIMITS,
    MAX_COMPONENTS_PER_SCREEN,
    MAX_EMBEDDED_LINKS_PER_SCREEN,
    MAX_FORM_COMPONENTS_PER_SCREEN,
    MAX_IMAGES_PER_SCREEN,
    MAX_SCREENS,
)


class FlowValidator:
    """
    Checks elements, screens and whole flows against the platform limits.

    Content limits come from a per-kind table of attribute -> maximum
    length; a kind missing from the table has no limits.
    """

    def __init__(self, content_limits: Optional[Dict[str, Dict[str, int]]] = None):
        """
        Initialize the validator.

        Args:
            content_limits: Optional replacement for the default limit table
        """
        self.content_limits = CONTENT_LIMITS if content_limits is None else content_limits
        self.logger = logging.getLogger(__name__)

    def validate_element(self, element: BaseElement) -> ValidationResult:
        """
        Check the length-limited attributes of an element.

        Absent and empty attributes are never reported.

        Args:
            element: The element to check

        Returns:
            A result with one error per attribute over its limit
        """
        result = ValidationResult()
        for attribute, limit in self.content_limits.get(element.kind, {}).items():
            value = getattr(element, attribute, None)
            if not value:
                continue
            current = len(value)
            if current <= limit:
                continue
            field = type(element).model_fields[attribute].alias or attribute
            unit = "items" if isinstance(value, list) else "characters"
            result.errors.append(ValidationIssue(
                code=IssueCode.CONTENT_LIMIT_EXCEEDED,
                message=f"{element.kind} {field} exceeds limit: {current}/{limit} {unit}",
                field=field,
                element_id=element.id,
                limit=limit,
                current=current,
            ))
        return result

    def validate_screen(self, screen: Screen) -> ValidationResult:
        """
        Check a screen's per-screen counts and each of its elements.

        Too many images or embedded links only produce warnings.

        Args:
            screen: The screen to check

        Returns:
            The screen's warnings followed by every element's issues
        """
        result = ValidationResult()

        images = self._count(screen, ElementKind.IMAGE)
        if images > MAX_IMAGES_PER_SCREEN:
            result.warnings.append(ValidationIssue(
                code=IssueCode.COUNT_LIMIT_EXCEEDED,
                message=f"Too many images on screen: {images}/{MAX_IMAGES_PER_SCREEN}",
                limit=MAX_IMAGES_PER_SCREEN,
                current=images,
            ))

        links = self._count(screen, ElementKind.EMBEDDED_LINK)
        if links > MAX_EMBEDDED_LINKS_PER_SCREEN:
            result.warnings.append(ValidationIssue(
                code=IssueCode.COUNT_LIMIT_EXCEEDED,
                message=f"Too many embedded links on screen: {links}/{MAX_EMBEDDED_LINKS_PER_SCREEN}",
                limit=MAX_EMBEDDED_LINKS_PER_SCREEN,
                current=links,
            ))

        for element in screen.elements:
            result.extend(self.validate_element(element))
        return result

    def validate_flow(self, screens: Sequence[Screen]) -> ValidationResult:
        """
        Check the flow's structural limits and every screen.

        Screen-level messages are prefixed with the screen's title.
        Navigation targets are not checked.

        Args:
            screens: The screens of the flow, in order

        Returns:
            The combined validation result
        """
        result = ValidationResult()

        if len(screens) > MAX_SCREENS:
            result.errors.append(ValidationIssue(
                code=IssueCode.COUNT_LIMIT_EXCEEDED,
                message=f"Flow exceeds maximum screens: {len(screens)}/{MAX_SCREENS}",
                limit=MAX_SCREENS,
                current=len(screens),
            ))

        for screen in screens:
            screen_result = ValidationResult()

            components = len(screen.elements)
            if components > MAX_COMPONENTS_PER_SCREEN:
                screen_result.errors.append(ValidationIssue(
                    code=IssueCode.COUNT_LIMIT_EXCEEDED,
                    message=f"Screen exceeds maximum components: {components}/{MAX_COMPONENTS_PER_SCREEN}",
                    limit=MAX_COMPONENTS_PER_SCREEN,
                    current=components,
                ))

            inputs = sum(
                1 for element in screen.elements
                if ElementKind.is_form_field(element.kind) and element.kind != ElementKind.FOOTER
            )
            if inputs > MAX_FORM_COMPONENTS_PER_SCREEN:
                screen_result.errors.append(ValidationIssue(
                    code=IssueCode.COUNT_LIMIT_EXCEEDED,
                    message=f"Screen exceeds maximum form components: {inputs}/{MAX_FORM_COMPONENTS_PER_SCREEN}",
                    limit=MAX_FORM_COMPONENTS_PER_SCREEN,
                    current=inputs,
                ))

            screen_result.extend(self.validate_screen(screen))
            result.extend(screen_result, prefix=f'Screen "{screen.title or screen.id}": ')

        self.logger.debug(
            f"Validated {len(screens)} screens: {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    @staticmethod
    def _count(screen: Screen, kind: str) -> int:
        return sum(1 for element in screen.elements if element.kind == kind)
