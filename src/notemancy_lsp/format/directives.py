"""Workspace directives embedded in note text.

A directive is a line of its own:

    %%nw reading-list     create workspace and add this note
    %%atw reading-list    append this note to the workspace
    %%dfw reading-list    remove this note from the workspace

Formatting executes directives and drops their lines from the document.
"""

import logging
import re
from pathlib import Path

from ..core.errors import WorkspaceError
from ..core.model import Directive
from ..core.ports import WorkspaceStore

logger = logging.getLogger(__name__)

DIRECTIVE_RE = re.compile(r"^%%(nw|atw|dfw)\s+(\S+)$")


def strip_directives(text: str) -> tuple[str, list[Directive]]:
    """Split `text` into (text without directive lines, directives found)."""
    kept = []
    directives = []
    for i, line in enumerate(text.splitlines(keepends=True)):
        m = DIRECTIVE_RE.match(line.strip())
        if m:
            directives.append(Directive(command=m.group(1), argument=m.group(2), line=i))
        else:
            kept.append(line)
    return "".join(kept), directives


def run_directive(directive: Directive, note: Path, store: WorkspaceStore) -> None:
    if directive.command == "nw":
        store.create(directive.argument, note)
    elif directive.command == "atw":
        store.append(directive.argument, note)
    elif directive.command == "dfw":
        store.remove(directive.argument, note)
    else:
        raise WorkspaceError(f"Unknown command: {directive.command}")


def run_directives(
    directives: list[Directive],
    note: Path | None,
    store: WorkspaceStore,
) -> int:
    """
    Execute directives for `note`; failures are logged, never raised.

    Returns:
        Number of directives that succeeded
    """
    done = 0
    for directive in directives:
        if note is None:
            logger.warning(
                "Skipping %s %s: document is not a local file",
                directive.command,
                directive.argument,
            )
            continue
        try:
            run_directive(directive, note, store)
        except (WorkspaceError, OSError) as e:
            logger.warning(
                "Workspace command %s %s failed for %s: %s",
                directive.command,
                directive.argument,
                note,
                e,
            )
            continue
        done += 1
    return done
