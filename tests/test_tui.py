# tests/test_tui.py - drives the Textual app headless
import asyncio

from textual.widgets import Input

from library_search.search_engine import SearchEngine
from library_search.tui_app import LibrarySearchApp


def run(coro):
    return asyncio.run(coro)


def test_typing_updates_suggestions_and_enter_searches():
    async def scenario():
        app = LibrarySearchApp(SearchEngine())
        async with app.run_test() as pilot:
            await pilot.press(*"java")
            await pilot.pause()
            assert app.suggestions == ["java"]
            assert app.outcome is None

            await pilot.press("enter")
            await pilot.pause()
            assert [b.id for b in app.outcome] == ["b4"]

    run(scenario())


def test_tab_accepts_highlighted_suggestion():
    async def scenario():
        app = LibrarySearchApp(SearchEngine())
        async with app.run_test() as pilot:
            await pilot.press(*"p")
            await pilot.pause()
            assert app.suggestions == ["programming", "patterns"]

            await pilot.press("down", "tab")
            await pilot.pause()
            assert app.query_one(Input).value == "patterns"
            assert [b.id for b in app.outcome] == ["b3"]

    run(scenario())


def test_empty_search_reports_no_results():
    async def scenario():
        app = LibrarySearchApp(SearchEngine())
        async with app.run_test() as pilot:
            await pilot.press(*"zzz", "enter")
            await pilot.pause()
            assert app.outcome is not None
            assert app.outcome.is_empty

    run(scenario())


def test_blank_enter_keeps_untouched_state_and_details_show_result():
    async def scenario():
        app = LibrarySearchApp(SearchEngine())
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            assert app.outcome is None

            await pilot.press(*"software", "enter")
            await pilot.pause()
            assert [b.id for b in app.outcome] == ["b2", "b5"]
            await pilot.press("pagedown", "ctrl+o")
            await pilot.pause()
            assert app.selected_result == 1

    run(scenario())


def test_bracket_text_does_not_break_panels():
    from library_search.core.book import Book
    from library_search.core.library_index import LibraryIndex
    from library_search.tui_app import ResultsPanel, SuggestionPanel

    index = LibraryIndex()
    index.add_book(Book("c1", "C[bold] tricks", "[red]Anon", ["c[/]"]))

    async def scenario():
        app = LibrarySearchApp(SearchEngine(index=index))
        async with app.run_test() as pilot:
            app.query_one(Input).value = "[/]"
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert app.outcome is not None and app.outcome.is_empty

            app.query_one(Input).value = "c["
            await pilot.pause()
            assert app.suggestions == ["C[bold] tricks", "c[/]"]
            await pilot.press("tab", "ctrl+o")
            await pilot.pause()
            assert [b.id for b in app.outcome] == ["c1"]

            shown = []
            results = app.query_one(ResultsPanel)
            results.update = shown.append
            results.update_results(app.outcome, 0)
            suggestions = app.query_one(SuggestionPanel)
            suggestions.update = shown.append
            suggestions.update_suggestions(app.suggestions, 0)
            assert "C[bold] tricks - [red]Anon (c[/])" in shown[0].plain
            assert "C[bold] tricks" in shown[1].plain

    run(scenario())
