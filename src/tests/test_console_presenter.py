"""
Unit tests for display_system - console rendering and labels.
"""
import io

import pytest

from display_system import ConsolePresenter, StaticLabelProvider
from gameplay_system import Target


class TestConsolePresenter:
    def test_render_grid_marks_active_quadrant(self):
        assert ConsolePresenter.render_grid(Target.BOTTOM_LEFT) == "[  ] [  ]\n[##] [  ]"

    @pytest.mark.asyncio
    async def test_highlight_writes_grid(self):
        out = io.StringIO()
        presenter = ConsolePresenter(highlight_ms=0, out=out)

        await presenter.highlight(Target.TOP_RIGHT)

        assert "[  ] [##]" in out.getvalue()

    def test_countdown_and_feedback(self):
        out = io.StringIO()
        presenter = ConsolePresenter(highlight_ms=0, out=out)

        presenter.show_countdown("2")
        presenter.show_countdown("")
        presenter.show_tap_feedback(False)

        lines = out.getvalue().splitlines()
        assert lines == ["   ... 2", "   GO!", "   ❌"]

    def test_empty_subtitle_clears_silently(self):
        out = io.StringIO()
        presenter = ConsolePresenter(out=out)
        presenter.set_subtitle("Watch closely")
        presenter.set_subtitle("")

        assert presenter.subtitle == ""
        assert out.getvalue() == "   Watch closely\n"


class TestStaticLabelProvider:
    def test_default_labels(self):
        labels = StaticLabelProvider()
        assert labels.label_for(Target.TOP_LEFT) == "Red button"

    def test_missing_label_is_empty(self):
        labels = StaticLabelProvider({Target.TOP_LEFT: "Start"})
        assert labels.label_for(Target.BOTTOM_RIGHT) == ""
