"""Tests for the application context (history + theme preference)."""

import pytest

from quadratic_pkg.config import HISTORY_KEY, THEME_KEY
from quadratic_pkg.context import AppContext
from quadratic_pkg.storage import JsonFileStore, MemoryStore
from quadratic_pkg.types import RealDistinct, ZeroLeadingCoefficientError


@pytest.fixture
def store():
    return MemoryStore()


class TestSolve:
    def test_solve_records_and_persists(self, store):
        ctx = AppContext.open(store)
        entry = ctx.solve(1, -3, 2)
        assert entry.result == RealDistinct(delta=1, x1=2, x2=1)
        assert ctx.history[0] is entry
        assert store.get(HISTORY_KEY) is not None

        reopened = AppContext.open(store)
        assert [e.id for e in reopened.history] == [entry.id]

    def test_invalid_coefficients_leave_history_unchanged(self, store):
        ctx = AppContext.open(store)
        ctx.solve(1, 2, 1)
        with pytest.raises(ZeroLeadingCoefficientError):
            ctx.solve(0, 1, 1)
        assert len(ctx.history) == 1

    def test_solve_without_recording(self, store):
        ctx = AppContext.open(store)
        entry = ctx.solve(1, 0, -4, record=False)
        assert len(entry.id) == 32
        assert entry.result.real_roots() == (2.0, -2.0)
        assert len(ctx.history) == 0
        assert ctx.history.find(entry.id) is None
        assert store.get(HISTORY_KEY) is None

    def test_rerun_adds_new_entry(self, store):
        ctx = AppContext.open(store)
        first = ctx.solve(1, -3, 2)
        again = ctx.rerun(first.id)
        assert again.id != first.id
        assert (again.a, again.b, again.c) == (1, -3, 2)
        assert [e.id for e in ctx.history] == [again.id, first.id]

    def test_rerun_unknown_id(self, store):
        assert AppContext.open(store).rerun("missing") is None

    def test_clear_history_persists(self, store):
        ctx = AppContext.open(store)
        ctx.solve(1, -3, 2)
        ctx.clear_history()
        assert len(AppContext.open(store).history) == 0


class TestTheme:
    def test_default_theme(self, store):
        assert AppContext.open(store).theme == "dark"

    def test_toggle_persists(self, store):
        ctx = AppContext.open(store)
        assert ctx.toggle_theme() == "light"
        assert store.get(THEME_KEY) == "light"
        assert AppContext.open(store).theme == "light"
        assert ctx.toggle_theme() == "dark"

    def test_set_theme_rejects_unknown(self, store):
        ctx = AppContext.open(store)
        with pytest.raises(ValueError):
            ctx.set_theme("sepia")
        assert ctx.theme == "dark"

    def test_unknown_stored_theme_falls_back(self):
        ctx = AppContext.open(MemoryStore({THEME_KEY: "sepia"}))
        assert ctx.theme == "dark"


def test_file_backed_context(tmp_path):
    path = tmp_path / "store.json"
    ctx = AppContext.open(JsonFileStore(path))
    entry = ctx.solve(2, -1, 0)
    ctx.set_theme("light")

    reopened = AppContext.open(JsonFileStore(path))
    assert reopened.theme == "light"
    assert reopened.history.find(entry.id) == entry
