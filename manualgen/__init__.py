from __future__ import annotations

from manualgen.core import (
    __version__,
    generate_manual,
    print_output,
    walk_manual,
    write_manual,
)
from manualgen.errors import (
    CommandCycleError,
    CommandDepthError,
    HelpInvocationError,
    ManualError,
)
from manualgen.parser import HelpRecord, parse_help

__all__ = [
    "__version__",
    "generate_manual",
    "walk_manual",
    "write_manual",
    "print_output",
    "parse_help",
    "HelpRecord",
    "ManualError",
    "HelpInvocationError",
    "CommandCycleError",
    "CommandDepthError",
]
