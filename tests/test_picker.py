"""Tests for the interactive pickers"""
import asyncio

from swagit.ui.picker import BranchPickerApp, filter_labels

LABELS = ["main [1111111]", "feature/login [2222222]", "fix/typo [3333333]"]


class TestFilterLabels:
    def test_empty_query_keeps_everything_in_order(self):
        assert filter_labels("", LABELS) == [0, 1, 2]

    def test_non_matching_labels_are_dropped(self):
        assert filter_labels("login", LABELS) == [1]

    def test_subsequence_match(self):
        assert 2 in filter_labels("fxtp", LABELS)

    def test_no_match(self):
        assert filter_labels("zzz", LABELS) == []


def run_picker(keys):
    async def run():
        app = BranchPickerApp("Pick", [(label, label.split()[0]) for label in LABELS])
        async with app.run_test() as pilot:
            await pilot.press(*keys)
        return app.return_value

    return asyncio.run(run())


class TestBranchPickerApp:
    def test_filter_and_select(self):
        assert run_picker(["l", "o", "g", "i", "n", "enter"]) == "feature/login"

    def test_escape_cancels(self):
        assert run_picker(["escape"]) is None
