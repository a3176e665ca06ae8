# tui_app.py - Library Search TUI Application
# -------------------------------------------------------
# Full-screen terminal front end for the SearchEngine.
# Features:
#  - Live suggestions as you type (title > author > tag)
#  - UP/DOWN to highlight a suggestion, TAB to search it
#  - ENTER searches whatever is in the input box
#  - PAGEUP / PAGEDOWN to move through results, CTRL+O for book details
#  - Latency readout for the last suggest/search call
# -------------------------------------------------------

from __future__ import annotations

import time
from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from .search_engine import SearchEngine, SearchOutcome


class SuggestionPanel(Static):
    """
    Suggestion list under the input box.
    The highlighted row is what TAB searches.
    """
    def update_suggestions(self, suggestions: List[str], selected: int):
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        # Text, not markup: suggestions are catalog strings
        lines = [
            Text(f" {s} ", style="reverse") if i == selected else Text(f" {s}")
            for i, s in enumerate(suggestions)
        ]
        self.update(Text("\n").join(lines))


class ResultsPanel(Static):
    """
    Search results.
    Blank before the first search, an explicit message when a search found nothing.
    """
    def update_results(self, outcome: Optional[SearchOutcome], selected: int):
        if outcome is None:
            self.update("")
            return
        if outcome.is_empty:
            self.update(Text(f"No results found for '{outcome.query}'", style="yellow"))
            return
        lines = []
        for i, book in enumerate(outcome):
            lines.append(Text.assemble(
                (book.title, "reverse" if i == selected else ""),
                (f" - {book.author} ({', '.join(book.tags)})", "dim"),
            ))
        self.update(Text("\n").join(lines))


class DetailView(Static):
    """Details of one book, shown on CTRL+O."""


class TypingLatency(Static):
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class LibrarySearchApp(App):
    """
    The main Textual app.
    Architecture:
     - Input events to SearchEngine entry points
     - engine output to reactive state
     - reactive state to panel updates
    """
    TITLE = "Library Search"
    CSS = """
    #left { width: 2fr; }
    #right { width: 3fr; }
    SuggestionPanel { height: auto; min-height: 3; border: round $accent; }
    ResultsPanel { height: 1fr; border: round $secondary; }
    DetailView { height: auto; border: round $primary; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept_suggestion", "Search suggestion", priority=True),
        Binding("down", "next_suggestion", "Next suggestion", show=False, priority=True),
        Binding("up", "prev_suggestion", "Prev suggestion", show=False, priority=True),
        Binding("pagedown", "next_result", "Next result", priority=True),
        Binding("pageup", "prev_result", "Prev result", priority=True),
        Binding("ctrl+o", "show_details", "Details", priority=True),
    ]

    # reactive values refresh the panels when changed
    suggestions = reactive(list, always_update=True, init=False)
    selected_suggestion = reactive(0, init=False)
    outcome: reactive[Optional[SearchOutcome]] = reactive(None, always_update=True, init=False)
    selected_result = reactive(0, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, engine: SearchEngine):
        super().__init__()
        self.engine = engine

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Search title, author or tag…", id="query")
                yield SuggestionPanel(id="suggestions")
            with Container(id="right"):
                yield ResultsPanel(id="results")
                yield DetailView(id="details")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(SuggestionPanel).update_suggestions([], 0)
        self.query_one(Input).focus()

    # Input events ---------------------------------------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh suggestions on every keystroke."""
        start = time.perf_counter()
        found = self.engine.on_text_changed(event.value)
        self.latency = time.perf_counter() - start
        self.selected_suggestion = 0
        self.suggestions = found

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.value.strip():
            self.run_search(event.value)

    def run_search(self, text: str) -> None:
        start = time.perf_counter()
        outcome = self.engine.on_query_submitted(text)
        self.latency = time.perf_counter() - start
        self.selected_result = 0
        self.outcome = outcome
        self.query_one(DetailView).update("")

    # Reactive state (watchers) ---------------------------------------------------
    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionPanel).update_suggestions(suggestions, self.selected_suggestion)

    def watch_selected_suggestion(self, selected):
        self.query_one(SuggestionPanel).update_suggestions(self.suggestions, selected)

    def watch_outcome(self, outcome):
        self.query_one(ResultsPanel).update_results(outcome, self.selected_result)

    def watch_selected_result(self, selected):
        self.query_one(ResultsPanel).update_results(self.outcome, selected)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_suggestion(self):
        """TAB = put the highlighted suggestion in the box and search it."""
        if not self.suggestions:
            return
        choice = self.suggestions[self.selected_suggestion]
        input_widget = self.query_one(Input)
        with input_widget.prevent(Input.Changed):
            input_widget.value = choice
        self.run_search(choice)

    def action_next_suggestion(self):
        if self.suggestions:
            self.selected_suggestion = (self.selected_suggestion + 1) % len(self.suggestions)

    def action_prev_suggestion(self):
        if self.suggestions:
            self.selected_suggestion = (self.selected_suggestion - 1) % len(self.suggestions)

    def action_next_result(self):
        if self.outcome and not self.outcome.is_empty:
            self.selected_result = (self.selected_result + 1) % len(self.outcome)

    def action_prev_result(self):
        if self.outcome and not self.outcome.is_empty:
            self.selected_result = (self.selected_result - 1) % len(self.outcome)

    def action_show_details(self):
        """CTRL+O = show the highlighted result."""
        if not self.outcome or self.outcome.is_empty:
            return
        book = self.outcome.books[self.selected_result]
        self.query_one(DetailView).update(Text.assemble(
            (book.title, "bold"), f"\nby {book.author}\n",
            ("id: ", "dim"), f"{book.id}\n",
            ("tags: ", "dim"), ", ".join(book.tags) or "-",
        ))


if __name__ == "__main__":
    LibrarySearchApp(SearchEngine()).run()
