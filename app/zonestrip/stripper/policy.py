"""Confirmation and dry-run governors.

The stripper asks its policy before every destructive step. A policy that
returns False vetoes that one step; the veto is not an error and does not
stop the rest of the traversal.

Example:
    >>> stripper = Stripper(policy=DryRunPolicy(), reporter=ConsoleReporter())
    >>> stripper.process("~/Downloads")
"""

from abc import ABC, abstractmethod

import typer
from rich.markup import escape

from zonestrip.utils.formatting import console, print_warning


class ConfirmPolicy(ABC):
    """Decides whether a destructive action may proceed."""

    @abstractmethod
    def confirm(self, action: str, target: str) -> bool:
        """Ask whether ``action`` may be performed on ``target``.

        Args:
            action: Short description of the change (e.g. "Strip Zone.Identifier").
            target: Display name of the file the change applies to.

        Returns:
            True to perform the action, False to skip it.
        """


class AlwaysProceedPolicy(ConfirmPolicy):
    """Approves every action."""

    def confirm(self, action: str, target: str) -> bool:
        return True


class DryRunPolicy(ConfirmPolicy):
    """Declines every action after reporting what would have happened."""

    def confirm(self, action: str, target: str) -> bool:
        console.print(
            f'[info]What if:[/] Performing the operation "{escape(action)}" '
            f'on target "{escape(target)}".'
        )
        return False


class PromptPolicy(ConfirmPolicy):
    """Asks the user before each action.

    Answers "a" (yes to all) and "l" (no to all) are remembered for the
    rest of the run.
    """

    _CHOICES = {
        "y": (True, False),
        "yes": (True, False),
        "a": (True, True),
        "n": (False, False),
        "no": (False, False),
        "l": (False, True),
    }

    def __init__(self) -> None:
        self._sticky: bool | None = None

    def confirm(self, action: str, target: str) -> bool:
        if self._sticky is not None:
            return self._sticky

        console.print(
            f'\n[bold_header]Confirm[/]\nPerform "{escape(action)}" on "{escape(target)}"?'
        )
        while True:
            answer = typer.prompt(
                "[y] Yes  [a] Yes to All  [n] No  [l] No to All",
                default="y",
                show_default=True,
            )
            choice = self._CHOICES.get(answer.strip().lower())
            if choice is None:
                print_warning(f"Invalid choice: {answer!r}")
                continue
            proceed, remember = choice
            if remember:
                self._sticky = proceed
            return proceed
