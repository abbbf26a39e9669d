"""
Main entry point for flow compilation.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from element_processors.base_processor import BaseElementProcessor
from element_processors.conditional_processor import ConditionalProcessor
from element_processors.element_chain_processor import ElementChainProcessor
from element_processors.footer_processor import FooterProcessor
from element_processors.input_processor import InputProcessor
from element_processors.media_processor import MediaProcessor
from element_processors.navigation_processor import NavigationProcessor
from element_processors.screen_processor import ScreenProcessor
from element_processors.selection_processor import SelectionProcessor
from element_processors.text_processor import TextProcessor
from flow_validator import FlowValidator
from models import (
    ElementKind,
    FlowCompilerError,
    FlowDocument,
    FooterAction,
    InvariantViolationError,
    Screen,
    ScreenContext,
    ValidationResult,
)
from models.content_limits import CONTENT_LIMITS
from models.flow_document import DATA_API_VERSION, FLOW_JSON_VERSION
from utils.data_binding_extractor import DataBindingExtractor
from utils.wire_key_formatter import WireKeyFormatter

logger = logging.getLogger(__name__)

SCREEN_LIST_ADAPTER = TypeAdapter(List[Screen])


class FileSystemStorage:
    """Storage class with async read_file for reading flow files."""
    async def read_file(self, file_path):
        if not isinstance(file_path, Path):
            raise TypeError("file_path must be a pathlib.Path")
        return file_path.read_text(encoding="utf-8")


class FlowCompilerService:
    """
    Main service for compiling screen graphs into flow documents.

    This class serves as the entry point for both CLI usage and programmatic
    access. It orchestrates compilation using the element processors and the
    data-binding extractor, and exposes the validator over the same input.
    """

    def __init__(self, storage: Optional[FileSystemStorage] = None):
        """
        Initialize the flow compiler service.

        Args:
            storage: File system storage used to read flow files

        Raises:
            InvariantViolationError: If a catalog kind has no processor or limit entry
        """
        self.storage = storage or FileSystemStorage()
        self.data_binding_extractor = DataBindingExtractor()
        self.validator = FlowValidator()

        # Processors of nested elements need the chain processor before the registry exists
        self.element_chain_processor = ElementChainProcessor({})
        self._initialize_processors()
        self.element_chain_processor.processors = self.processors
        self.screen_processor = ScreenProcessor(self.element_chain_processor)

        self._check_catalog_coverage()

    def _initialize_processors(self) -> None:
        """Initialize all element processors, keyed by the kinds they handle."""
        element_processors: List[BaseElementProcessor] = [
            TextProcessor(),
            InputProcessor(),
            SelectionProcessor(),
            MediaProcessor(),
            NavigationProcessor(),
            FooterProcessor(),
            ConditionalProcessor(self.element_chain_processor),
        ]
        self.processors: Dict[str, BaseElementProcessor] = {}
        for processor in element_processors:
            for kind in processor.kinds:
                self.processors[kind] = processor

    def _check_catalog_coverage(self) -> None:
        """Make sure every catalog kind can be rendered and validated."""
        for kind in ElementKind.get_all_kinds():
            if kind not in self.processors:
                raise InvariantViolationError(f"No processor registered for element kind '{kind}'")
            if kind not in CONTENT_LIMITS:
                raise InvariantViolationError(f"No content limit entry for element kind '{kind}'")

    def load_screens(self, raw: Union[List[Any], Dict[str, Any]]) -> List[Screen]:
        """
        Build screen models from decoded JSON.

        Args:
            raw: Either a list of screens or an object with a ``screens`` list

        Returns:
            The validated screens

        Raises:
            InvariantViolationError: If the input is not a well-formed screen graph
        """
        if isinstance(raw, dict):
            if "screens" not in raw:
                raise InvariantViolationError("Flow object has no 'screens' list")
            raw = raw["screens"]
        try:
            return SCREEN_LIST_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise InvariantViolationError(f"Malformed screen graph: {e}") from e

    def compile(self, screens: Sequence[Union[Screen, Dict[str, Any]]]) -> FlowDocument:
        """
        Compile a screen graph into a flow document.

        Compilation does not validate; run ``validate`` first to enforce the
        platform limits.

        Args:
            screens: The screens of the flow, in order, as models or plain dictionaries

        Returns:
            The compiled document in internal naming

        Raises:
            InvariantViolationError: If the screens are malformed
        """
        screen_models = self._coerce_screens(screens)
        logger.debug(f"Compiling flow with {len(screen_models)} screens")

        document: FlowDocument = {
            "version": FLOW_JSON_VERSION,
            "data_api_version": DATA_API_VERSION,
            "screens": [
                self.screen_processor.process(screen, ScreenContext(screen, index, screen_models))
                for index, screen in enumerate(screen_models)
            ],
        }

        if len(screen_models) > 1:
            document["routing_model"] = self._build_routing_model(screen_models)

        data = self.data_binding_extractor.extract(screen_models)
        if data:
            document["data"] = data

        return document

    def validate(self, screens: Sequence[Union[Screen, Dict[str, Any]]]) -> ValidationResult:
        """
        Validate a screen graph against the platform limits.

        Args:
            screens: The screens of the flow, in order

        Returns:
            The flow's validation result
        """
        return self.validator.validate_flow(self._coerce_screens(screens))

    async def read_flow_file(self, flow_file: Path) -> List[Screen]:
        """
        Read and parse a flow file.

        Args:
            flow_file: Path to a JSON file holding the screen graph

        Returns:
            The screens of the flow
        """
        content = await self.storage.read_file(flow_file)
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvariantViolationError(f"Flow file {flow_file} is not valid JSON: {e}") from e
        return self.load_screens(raw)

    async def compile_file(self, flow_file: Path) -> FlowDocument:
        """
        Compile a flow file.

        Args:
            flow_file: Path to a JSON file holding the screen graph

        Returns:
            The compiled document in internal naming
        """
        return self.compile(await self.read_flow_file(flow_file))

    def _coerce_screens(self, screens: Sequence[Union[Screen, Dict[str, Any]]]) -> List[Screen]:
        if all(isinstance(screen, Screen) for screen in screens):
            return list(screens)
        return self.load_screens(list(screens))

    def _build_routing_model(self, screens: Sequence[Screen]) -> Dict[str, List[str]]:
        """
        Derive the navigation graph from the screens' Footers.

        Args:
            screens: The screens of the flow, in order

        Returns:
            Screen id -> ids of the screens it can navigate to
        """
        routing_model: Dict[str, List[str]] = {}
        for screen in screens:
            footer = screen.find_footer()
            if footer is not None and footer.action == FooterAction.NAVIGATE and footer.next_screen:
                routing_model[screen.id] = [footer.next_screen]
            else:
                routing_model[screen.id] = []
        return routing_model


def _print_validation(result: ValidationResult) -> None:
    for issue in result.errors:
        print(f"ERROR: {issue.message}")
    for issue in result.warnings:
        print(f"WARNING: {issue.message}")
    status = "valid" if result.is_valid else "invalid"
    print(f"Flow is {status}: {len(result.errors)} errors, {len(result.warnings)} warnings")


async def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for the flow compiler using argparse."""
    parser = argparse.ArgumentParser(
        description="Compile a screen graph JSON file into a flow document."
    )
    parser.add_argument(
        "flow_file",
        type=str,
        help="Path to the screen graph JSON file to compile"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Print the validation report before the document"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error instead of compiling when validation fails"
    )
    parser.add_argument(
        "--wire",
        action="store_true",
        help="Print the document with the platform's hyphenated keys"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    storage = FileSystemStorage()
    compiler = FlowCompilerService(storage)
    flow_file = Path(args.flow_file)

    try:
        screens = await compiler.read_flow_file(flow_file)

        if args.validate or args.strict:
            result = compiler.validate(screens)
            if args.validate:
                _print_validation(result)
            if args.strict and not result.is_valid:
                print(f"Error: validation failed with {len(result.errors)} errors", file=sys.stderr)
                return 1

        document = compiler.compile(screens)
        if args.wire:
            print(WireKeyFormatter.dumps(WireKeyFormatter.to_wire(document), indent=args.indent))
        else:
            print(json.dumps(document, indent=args.indent, ensure_ascii=False))
    except (FlowCompilerError, OSError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
