"""Searchable selection list built on Textual.

The app starts with the search box focused; typing narrows the list, the
arrow keys move the highlight and Enter picks. The app exits with the index
of the chosen item in the original list, or None when the user aborts.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Label, OptionList

from reassign_reviewer.tui.filtering import filter_items

LIST_HEIGHT = 12


class SelectionApp(App[int | None]):
    """Pick one item from a list, filtering as the user types."""

    CSS = f"""
    Screen {{
        height: auto;
    }}

    #title {{
        text-style: bold;
        padding: 0 1;
    }}

    #search {{
        border: none;
        height: 1;
        padding: 0 1;
    }}

    #options {{
        height: auto;
        max-height: {LIST_HEIGHT};
        border: none;
    }}

    #empty {{
        color: $text-muted;
        padding: 0 1;
    }}
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
    ]

    def __init__(self, title: str, items: list[str]) -> None:
        """Create a selection list.

        Args:
            title: Label shown above the search box
            items: Display strings, one per choice
        """
        super().__init__()
        self._title = title
        self._items = items
        self._visible: list[int] = list(range(len(items)))

    @property
    def visible_indices(self) -> list[int]:
        """Indices of the items currently shown, in display order."""
        return self._visible

    def compose(self) -> ComposeResult:
        yield Label(self._title, id="title")
        yield Input(placeholder="Search...", id="search")
        yield OptionList(*self._items, id="options")
        yield Label("No matches", id="empty")

    def on_mount(self) -> None:
        self.query_one("#empty", Label).display = False
        options = self.query_one("#options", OptionList)
        if self._items:
            options.highlighted = 0
        self.query_one("#search", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._visible = filter_items(self._items, event.value)
        options = self.query_one("#options", OptionList)
        options.clear_options()
        options.add_options([self._items[index] for index in self._visible])
        if self._visible:
            options.highlighted = 0
        self.query_one("#empty", Label).display = not self._visible

    def on_input_submitted(self, event: Input.Submitted) -> None:
        highlighted = self.query_one("#options", OptionList).highlighted
        if highlighted is None or not self._visible:
            return
        self.exit(self._visible[highlighted])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self._visible[event.option_index])

    def action_cursor_up(self) -> None:
        self.query_one("#options", OptionList).action_cursor_up()

    def action_cursor_down(self) -> None:
        self.query_one("#options", OptionList).action_cursor_down()

    def action_cancel(self) -> None:
        self.exit(None)
