from mpgblog.render import render_floating_share_button, render_share_buttons, render_toc
from mpgblog.widgets import TocEntry


def test_render_toc_indents_nested_entries() -> None:
    html = render_toc([TocEntry("intro", "Intro"), TocEntry("detail", "Detail & More", level=2)])

    assert '<li class="toc-level-1"><a href="#intro" data-toc-target="intro">Intro</a></li>' in html
    assert 'class="toc-level-2" style="margin-left: 1em"' in html
    assert "Detail &amp; More" in html
    assert 'aria-expanded="true"' in html


def test_render_toc_empty_list_renders_nothing() -> None:
    assert render_toc([]) == ""


def test_share_buttons_open_new_tab_and_copy_absolute_url() -> None:
    html = render_share_buttons("/blog/x", "T", origin="https://example.com/")

    assert html.count('target="_blank" rel="noopener noreferrer"') == 7
    assert 'data-copy-url="https://example.com/blog/x"' in html


def test_floating_button_starts_hidden() -> None:
    html = render_floating_share_button()
    assert 'data-threshold="500"' in html
    assert " hidden>" in html
