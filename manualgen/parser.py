"""
Parsing of plain-text help output into a structured record.

The expected shape is the one printed by clap-style tools::

    <one-line description>

    Usage: <usage string>

    Commands:
      <name>  <description>

    Arguments:
      <name>  <description>

    Options:
      <syntax>  <description>

Sections may appear in any order. Anything unexpected is dropped rather
than rejected.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional, Tuple

SEPARATOR = "  "

_SECTION_HEADERS: Dict[str, str] = {
    "Commands:": "commands",
    "Options:": "options",
    "Arguments:": "arguments",
}


class CommandEntry(NamedTuple):
    name: str
    description: str


class ArgEntry(NamedTuple):
    label: str
    description: str


class OptionEntry(NamedTuple):
    label: str
    description: str


class HelpRecord(NamedTuple):
    """One parsed help block."""

    description: str
    usage: str
    arguments: Tuple[ArgEntry, ...]
    commands: Tuple[CommandEntry, ...]
    options: Tuple[OptionEntry, ...]


def _split_entry(line: str) -> Tuple[str, str]:
    """Split an entry line into its label and description."""
    parts = line.split(SEPARATOR)
    return parts[0].strip(), SEPARATOR.join(parts[1:]).strip()


def parse_help(text: str, *, skip_help: bool = True) -> HelpRecord:
    """
    Parse one block of help text.

    Args:
        text: The full standard output of a single help invocation.
        skip_help: Leave out a command entry named exactly ``help``.

    Returns:
        A `HelpRecord`. Lists are empty when a section is missing.
    """
    lines = text.split("\n")
    description = lines[0] if lines else ""

    usage = ""
    arguments: List[ArgEntry] = []
    commands: List[CommandEntry] = []
    options: List[OptionEntry] = []

    current: Optional[str] = None

    for raw in lines[1:]:
        line = raw.strip()

        if not line:
            current = None
            continue

        if line.startswith("Usage:") and current is None:
            usage = line.split(":", 1)[1].strip()
            continue

        if line in _SECTION_HEADERS:
            current = _SECTION_HEADERS[line]
            continue

        if current is None:
            continue

        label, desc = _split_entry(line)
        if current == "commands":
            if skip_help and label == "help":
                continue
            commands.append(CommandEntry(name=label, description=desc))
        elif current == "options":
            options.append(OptionEntry(label=label, description=desc))
        else:
            arguments.append(ArgEntry(label=label, description=desc))

    return HelpRecord(
        description=description,
        usage=usage,
        arguments=tuple(arguments),
        commands=tuple(commands),
        options=tuple(options),
    )
