"""
Exception types raised by the flow compiler.

Validation problems are never raised; they are reported as ValidationIssue
records. The exceptions below signal programmer errors or malformed input
that the caller is expected to catch at the top level.
"""


class FlowCompilerError(Exception):
    """Base class for all fatal flow compiler errors."""


class UnsupportedKindError(FlowCompilerError):
    """
    Raised when an element kind is not part of the element catalog.

    This is a programmer error: the editor palette only offers catalog kinds.
    """

    def __init__(self, kind: str):
        """
        Initialize the error.

        Args:
            kind: The element kind that was requested
        """
        self.kind = kind
        super().__init__(f"Unsupported element kind '{kind}'")


class InvariantViolationError(FlowCompilerError):
    """
    Raised when a screen graph is malformed or an edit would make it so.

    Examples are a screen without an elements list handed to the compiler,
    or an editor operation that would give a screen a second Footer or a
    duplicate id. The message is meant for logs, not for the author.
    """
