"""
CLI display modules.
"""

from cli.display.diagnostics import display_diagnostics
from cli.display.hex_view import display_parameter_bytes
from cli.display.tables import display_patch, display_setup

__all__ = [
    "display_diagnostics",
    "display_parameter_bytes",
    "display_patch",
    "display_setup",
]
