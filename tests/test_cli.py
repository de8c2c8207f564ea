"""Tests for the pagenav command-line interface."""

from __future__ import annotations

import pytest

from pagenav.cli import main


class TestLinks:
    def test_renders_links(self, capsys):
        assert main(["links", "--url", "http://x/p?page=2of3", "--total", "30"]) == 0
        out = capsys.readouterr().out
        assert '<ul class="pagination">' in out
        assert '<li class="active"><span>2</span></li>' in out
        assert '<li><a href="http://x/p?page=3of3">3</a></li>' in out

    def test_pad_and_framework(self, capsys):
        assert main([
            "links", "--url", "http://x/p?page=10of20", "--pad", "1", "--framework", "semantic_ui",
        ]) == 0
        out = capsys.readouterr().out
        assert '<div class="active item">10</div>' in out
        assert '<a class="item" href="http://x/p?page=12of20">12</a>' not in out

    def test_single_page_prints_empty_line(self, capsys):
        assert main(["links", "--url", "http://x/p", "--total", "3"]) == 0
        assert capsys.readouterr().out == "\n"

    def test_invalid_page_size(self, capsys):
        assert main(["links", "--url", "http://x/p", "--per-page", "0"]) == 1
        assert "invalid page_size" in capsys.readouterr().err

    def test_unknown_framework_is_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["links", "--url", "http://x/p", "--framework", "tailwind"])
        assert exc_info.value.code == 2


class TestPager:
    def test_uikit_pager(self, capsys):
        assert main([
            "pager", "--url", "http://x/p?page=2of3", "--framework", "uikit", "--previous", "Newer",
        ]) == 0
        out = capsys.readouterr().out
        assert '<ul class="uk-pagination">' in out
        assert "Newer" in out
        assert 'href="http://x/p?page=3of3"' in out


class TestInfo:
    def test_state_summary(self, capsys):
        assert main(["info", "--url", "http://x/p?page=4of10", "--key", "page"]) == 0
        out = capsys.readouterr().out
        assert "current_page: 4" in out
        assert "number_pages: 10" in out
        assert "offset: 30" in out
        assert "length: 10" in out
        assert "last_page: False" in out
        assert "previous_url: http://x/p?page=3of10" in out
        assert "next_url: http://x/p?page=5of10" in out
