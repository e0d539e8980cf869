"""Terminal picker built on Rich prompts and tables."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table


if TYPE_CHECKING:
    from projkt.core.ports import Candidate


def fuzzy_score(query: str, name: str) -> int | None:
    """Score how well query matches name as a case-insensitive subsequence.

    Returns:
        Length of the matched span (lower is tighter), or None if the
        characters of query do not all appear in order in name.
    """
    if not query:
        return 0
    haystack = name.lower()
    start = pos = -1
    for ch in query.lower():
        pos = haystack.find(ch, pos + 1)
        if pos == -1:
            return None
        if start == -1:
            start = pos
    return pos - start + 1


def fuzzy_filter(candidates: Sequence[Candidate], query: str) -> list[Candidate]:
    """Keep candidates matching query, tightest matches first."""
    scored = []
    for index, candidate in enumerate(candidates):
        score = fuzzy_score(query.strip(), candidate[0])
        if score is not None:
            scored.append((score, index, candidate))
    scored.sort(key=lambda item: (item[0], item[1]))
    return [candidate for _, _, candidate in scored]


def parse_selection(raw: str, count: int, multi: bool) -> list[int]:
    """Turn "1, 3-4" into zero-based indices, in the order typed.

    Raises:
        ValueError: On malformed input, out-of-range numbers, or more than
            one number when multi is False.
    """
    indices: list[int] = []
    for token in re.split(r"[,\s]+", raw.strip()):
        if not token:
            continue
        match = re.fullmatch(r"(\d+)(?:-(\d+))?", token)
        if match is None:
            raise ValueError(f"'{token}' is not a number or range")
        first = int(match.group(1))
        last = int(match.group(2) or first)
        step = 1 if last >= first else -1
        for number in range(first, last + step, step):
            if not 1 <= number <= count:
                raise ValueError(f"{number} is out of range (1-{count})")
            if number - 1 not in indices:
                indices.append(number - 1)

    if not multi and len(indices) > 1:
        raise ValueError("Select a single entry")
    return indices


class RichPicker:
    """Interactive picker implementing PickerPort.

    Asks for a fuzzy filter, shows the matches as a numbered table and
    reads the chosen numbers. A blank answer selects nothing.

    Example:
        picker = RichPicker()
        chosen = picker.pick([("Python", b"..."), ("Node", b"...")], multi=True)
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the picker.

        Args:
            console: Rich console to draw on. Defaults to stderr so that
                stdout stays clean.
            stream: Read answers from this stream instead of the terminal.
        """
        self._console = console or Console(stderr=True)
        self._stream = stream

    def _ask(self, prompt: str) -> str:
        return Prompt.ask(
            prompt,
            default="",
            show_default=False,
            console=self._console,
            stream=self._stream,
        )

    def _table(self, matches: Sequence[Candidate]) -> Table:
        table = Table()
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Name")
        for number, (name, _content) in enumerate(matches, 1):
            table.add_row(str(number), name)
        return table

    def pick(self, candidates: Sequence[Candidate], multi: bool) -> list[Candidate]:
        """Let the user choose among candidates.

        Args:
            candidates: (name, content) pairs in catalog order.
            multi: Allow more than one entry.

        Returns:
            The chosen pairs in the order the user typed them.
        """
        if not candidates:
            return []

        while True:
            query = self._ask("Filter (blank for all)")
            matches = fuzzy_filter(candidates, query)
            if matches:
                break
            self._console.print(f"[yellow]Nothing matches '{escape(query)}'[/yellow]")

        self._console.print(self._table(matches))
        prompt = "Select numbers (e.g. 1,3-4)" if multi else "Select a number"
        while True:
            raw = self._ask(prompt)
            if not raw.strip():
                return []
            try:
                indices = parse_selection(raw, len(matches), multi)
            except ValueError as e:
                self._console.print(f"[red]{escape(str(e))}[/red]")
                continue
            return [matches[i] for i in indices]
