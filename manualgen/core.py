from __future__ import annotations

import logging
import subprocess  # nosec
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from manualgen.errors import CommandCycleError, CommandDepthError, HelpInvocationError
from manualgen.parser import HelpRecord, parse_help

# Try to import rich for optional enhancements.
try:
    import rich.console
    import rich.markdown

    _RICH_AVAILABLE = True
except ImportError:
    _RICH_AVAILABLE = False


__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Type definitions
CommandPath = Tuple[str, ...]

DEFAULT_OUTPUT = "MANUAL.md"
DEFAULT_TITLE = "Manual"
DEFAULT_HELP_FLAG = "--help"


def call_help(
    tool: Sequence[str],
    path: CommandPath = (),
    *,
    help_flag: str = DEFAULT_HELP_FLAG,
    timeout: Optional[float] = None,
    env: Optional[Dict[str, str]] = None,
) -> str:
    """
    Run the external tool for one command path and return its help text.

    Only standard output is kept. A non-zero exit status is tolerated since
    some tools exit with an error code after printing help.

    Raises:
        HelpInvocationError: The tool could not be started or timed out.
    """
    argv = list(tool) + list(path) + [help_flag]
    logger.debug("Running %s", argv)
    try:
        result = subprocess.run(  # nosec
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except FileNotFoundError as e:
        raise HelpInvocationError(argv, "command not found") from e
    except subprocess.TimeoutExpired as e:
        raise HelpInvocationError(argv, f"timed out after {timeout} seconds") from e
    except OSError as e:
        raise HelpInvocationError(argv, str(e)) from e

    if result.returncode != 0:
        logger.warning(
            "'%s' exited with code %d", " ".join(argv), result.returncode
        )
    return result.stdout


def command_anchor(path: CommandPath) -> str:
    """
    Anchor of the heading `heading` produces for a non-root path.

    Lowercased to follow GitHub's heading slugs.
    """
    return "#" + "-".join(("command",) + path).lower()


def heading(path: CommandPath, depth: int, *, title: str = DEFAULT_TITLE) -> str:
    marker = "#" * (depth + 1)
    if path:
        return f"{marker} Command: {' '.join(path)}"
    return f"{marker} {title}"


def _table(header: Tuple[str, str], rows: List[Tuple[str, str]]) -> List[str]:
    lines = [
        f"<ins>**{header[0]}s:**</ins>",
        "",
        f"| {header[0]} | {header[1]} |",
        "| --- | --- |",
    ]
    lines.extend(f"| {left} | {right} |" for left, right in rows)
    lines.append("")
    return lines


def render_section(
    record: HelpRecord, path: CommandPath = (), *, links: bool = True
) -> List[str]:
    """
    Render one parsed help record as Markdown lines.

    Args:
        record: The parsed help of the command at `path`.
        path: The command path, used to build links to child sections.
        links: Link command names to their sections instead of plain code spans.
    """
    lines: List[str] = [
        record.description,
        "",
        "<ins>**Usage:**</ins>",
        "",
        "```",
        record.usage,
        "```",
        "",
    ]

    if record.commands:
        rows = []
        for cmd in record.commands:
            if links and cmd.name != "help":
                label = f"[{cmd.name}]({command_anchor(path + (cmd.name,))})"
            else:
                label = f"`{cmd.name}`"
            rows.append((label, cmd.description))
        lines.extend(_table(("Command", "Description"), rows))

    if record.arguments:
        rows = [(f"`{arg.label}`", arg.description) for arg in record.arguments]
        lines.extend(_table(("Argument", "Description"), rows))

    if record.options:
        rows = [(f"`{opt.label}`", opt.description) for opt in record.options]
        lines.extend(_table(("Option", "Description"), rows))

    return lines


def walk_manual(
    tool: Sequence[str],
    path: CommandPath = (),
    depth: int = 0,
    *,
    help_flag: str = DEFAULT_HELP_FLAG,
    title: str = DEFAULT_TITLE,
    links: bool = True,
    skip_help: bool = True,
    timeout: Optional[float] = None,
    max_depth: Optional[int] = None,
    env: Optional[Dict[str, str]] = None,
    ancestors: Tuple[str, ...] = (),
) -> List[str]:
    """
    Document the command at `path` and all of its subcommands.

    Sections are produced depth-first, pre-order: a command's section is
    complete before any of its children are visited, and children follow the
    order of the parent's help output. A `help` subcommand is never visited.

    Args:
        tool: The base command as a list of strings (e.g., `["pmv-cli"]`).
        path: Subcommand names from the root to the current command.
        depth: Recursion depth, which sets the heading level.
        help_flag: Flag appended to every invocation.
        title: Heading text of the root section.
        links: Link command names in Commands tables.
        skip_help: Leave the `help` subcommand out of Commands tables.
        timeout: Timeout in seconds for each subprocess call.
        max_depth: Maximum subcommand depth, unbounded when None.
        env: Optional environment variables for the subprocess.
        ancestors: Help texts of the commands above `path`.

    Returns:
        The Markdown lines of this section followed by those of its children.

    Raises:
        CommandCycleError: A command prints the same help as one of its ancestors.
        CommandDepthError: A subcommand is deeper than `max_depth`.
    """
    logger.debug("Documenting %r", " ".join(path) or "<root>")
    text = call_help(tool, path, help_flag=help_flag, timeout=timeout, env=env)
    if text in ancestors:
        raise CommandCycleError(path)

    lines = [heading(path, depth, title=title), ""]
    record = parse_help(text, skip_help=skip_help)
    lines.extend(render_section(record, path, links=links))

    for cmd in record.commands:
        if cmd.name == "help":
            continue

        child = path + (cmd.name,)
        if max_depth is not None and len(child) > max_depth:
            raise CommandDepthError(child, max_depth)

        lines.extend(
            walk_manual(
                tool,
                child,
                depth + 1,
                help_flag=help_flag,
                title=title,
                links=links,
                skip_help=skip_help,
                timeout=timeout,
                max_depth=max_depth,
                env=env,
                ancestors=ancestors + (text,),
            )
        )

    return lines


def generate_manual(tool: Sequence[str], **options) -> str:
    """
    Build the complete Markdown manual for an external tool.

    Accepts the keyword options of `walk_manual`.
    """
    if not tool:
        raise ValueError("A command to document is required.")
    return "\n".join(walk_manual(list(tool), **options))


def write_manual(doc: str, path: Union[str, Path] = DEFAULT_OUTPUT) -> Path:
    """Write the manual in one go, replacing any previous file."""
    target = Path(path)
    target.write_text(doc, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(doc), target)
    return target


def print_output(doc: str, *, preview: bool = False) -> None:
    """
    Print the manual to stdout.

    Args:
        doc: The Markdown document.
        preview: Render the Markdown through rich when it is installed.
    """
    if preview and _RICH_AVAILABLE:
        console = rich.console.Console()
        console.print(rich.markdown.Markdown(doc))
    else:
        print(doc)
