"""Textual apps for picking branches and confirming actions.

Every app returns None (or False) when the user cancels with Escape; callers
treat that as a clean no-op.
"""

from typing import List, Optional, Sequence, Tuple

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.fuzzy import Matcher
from textual.widgets import Footer, Input, OptionList, SelectionList, Static
from textual.widgets.option_list import Option

from swagit.ui.screens import ConfirmScreen


def filter_labels(query: str, labels: Sequence[str]) -> List[int]:
    """Indexes of labels matching query, best fuzzy score first.

    An empty query matches everything in the original order. Ties keep the
    original order.
    """
    if not query:
        return list(range(len(labels)))

    matcher = Matcher(query)
    scored = []
    for index, label in enumerate(labels):
        score = matcher.match(label)
        if score > 0:
            scored.append((-score, index))
    scored.sort()
    return [index for _, index in scored]


class BranchPickerApp(App[Optional[str]]):
    """Fuzzy single-choice picker. Returns the chosen value or None."""

    CSS = """
    #prompt {
        padding: 0 1;
        text-style: bold;
    }

    OptionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("up", "cursor_up", "Up", show=False),
    ]

    def __init__(self, prompt: str, choices: Sequence[Tuple[str, str]]):
        """
        Args:
            prompt: Question shown above the list
            choices: (label, value) pairs in display order
        """
        super().__init__()
        self.prompt = prompt
        self.choices = list(choices)
        self._visible: List[int] = list(range(len(self.choices)))

    def compose(self) -> ComposeResult:
        yield Static(self.prompt, id="prompt", markup=False)
        yield Input(placeholder="Type to filter", id="filter")
        yield OptionList(*self._options(), id="choices")
        yield Footer()

    def _options(self) -> List[Option]:
        # Text, not markup: labels contain "[hash]"
        return [Option(Text(self.choices[i][0])) for i in self._visible]

    def on_input_changed(self, event: Input.Changed) -> None:
        labels = [label for label, _ in self.choices]
        self._visible = filter_labels(event.value, labels)
        option_list = self.query_one(OptionList)
        option_list.clear_options()
        option_list.add_options(self._options())
        if self._visible:
            option_list.highlighted = 0

    def on_input_submitted(self, event: Input.Submitted) -> None:
        highlighted = self.query_one(OptionList).highlighted
        if highlighted is not None and highlighted < len(self._visible):
            self.exit(self.choices[self._visible[highlighted]][1])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self.choices[self._visible[event.option_index]][1])

    def action_cursor_down(self) -> None:
        self.query_one(OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one(OptionList).action_cursor_up()

    def action_cancel(self) -> None:
        self.exit(None)


class BranchMultiPickerApp(App[Optional[List[str]]]):
    """Multi-choice picker. Returns the chosen values (possibly empty) or None."""

    CSS = """
    #prompt {
        padding: 0 1;
        text-style: bold;
    }

    SelectionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "submit", "Confirm", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
    ]

    def __init__(self, prompt: str, choices: Sequence[Tuple[str, str]]):
        super().__init__()
        self.prompt = prompt
        self.choices = list(choices)

    def compose(self) -> ComposeResult:
        yield Static(f"{self.prompt} (space to toggle)", id="prompt", markup=False)
        yield SelectionList[str](*[(Text(label), value) for label, value in self.choices])
        yield Footer()

    def action_submit(self) -> None:
        selected = set(self.query_one(SelectionList).selected)
        # Keep display order rather than toggle order
        self.exit([value for _, value in self.choices if value in selected])

    def action_cancel(self) -> None:
        self.exit(None)


class ConfirmApp(App[bool]):
    """Yes/no question in a modal dialog."""

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def on_mount(self) -> None:
        self.push_screen(ConfirmScreen(self.message), callback=self._on_answer)

    def _on_answer(self, answer: Optional[bool]) -> None:
        self.exit(bool(answer))


def pick_branch(prompt: str, choices: Sequence[Tuple[str, str]]) -> Optional[str]:
    """Run the fuzzy picker; None when cancelled."""
    return BranchPickerApp(prompt, choices).run()


def pick_branches(prompt: str, choices: Sequence[Tuple[str, str]]) -> Optional[List[str]]:
    """Run the multi picker; None when cancelled."""
    return BranchMultiPickerApp(prompt, choices).run()


def confirm(message: str) -> bool:
    """Ask a yes/no question; False when cancelled."""
    return bool(ConfirmApp(message).run())
