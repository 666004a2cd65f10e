"""Exceptions raised while generating a manual."""

from __future__ import annotations

from typing import Sequence, Tuple


class ManualError(Exception):
    """Base class for manualgen failures."""


class HelpInvocationError(ManualError):
    """The external tool could not be run to produce help text."""

    def __init__(self, argv: Sequence[str], reason: str):
        self.argv = list(argv)
        self.reason = reason
        super().__init__(f"could not run '{' '.join(self.argv)}': {reason}")


class CommandCycleError(ManualError):
    """A command lists itself or one of its ancestors as a subcommand."""

    def __init__(self, path: Tuple[str, ...]):
        self.path = path
        super().__init__(f"command cycle detected at '{' '.join(path)}'")


class CommandDepthError(ManualError):
    def __init__(self, path: Tuple[str, ...], max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"command '{' '.join(path)}' is deeper than the limit of {max_depth}"
        )
