"""Errors raised at the command-line boundary.

Reading documentation never raises for missing metadata; these cover
loading controller sources and strict-mode escalation.
"""


class ApiDocError(Exception):
    """Base class for mvc-api-docs errors."""


class SourceLoadError(ApiDocError):
    """A controller source file could not be imported."""


class StrictModeError(ApiDocError):
    """Warnings were emitted while building documentation in strict mode."""

    def __init__(self, warnings: list[str]):
        self.warnings = warnings
        super().__init__(
            f"{len(warnings)} warning(s) while building documentation:\n"
            + "\n".join(f"  - {w}" for w in warnings)
        )
