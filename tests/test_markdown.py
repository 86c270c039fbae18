from mpgblog.content import extract_toc, parse_headings, render_markdown
from mpgblog.widgets import TocEntry

BODY = """
Intro with a [calculator](/road-trip-cost-calculator) and an [outside link](https://www.nps.gov/).

## Route 66 (Chicago to Los Angeles) {#route66}

Some **bold** and *emphasis* text
spanning two lines.

- First stop
- Second stop

### Budget Tips

#### Fine print

## Budget Tips
"""


def test_headings_get_anchor_ids() -> None:
    headings = parse_headings(BODY)

    assert [(h.level, h.id) for h in headings] == [
        (1, "route66"),
        (2, "budget-tips"),
        (3, "fine-print"),
        (1, "budget-tips-2"),
    ]
    assert headings[0].text == "Route 66 (Chicago to Los Angeles)"


def test_render_markdown_blocks() -> None:
    rendered = render_markdown(BODY)
    html = rendered.html

    assert '<h2 id="route66">Route 66 (Chicago to Los Angeles)</h2>' in html
    assert '<h3 id="budget-tips">Budget Tips</h3>' in html
    assert '<h4 id="fine-print">Fine print</h4>' in html
    assert "<p>Some <strong>bold</strong> and <em>emphasis</em> text spanning two lines.</p>" in html
    assert "<ul>\n  <li>First stop</li>\n  <li>Second stop</li>\n</ul>" in html


def test_links_internal_and_external() -> None:
    html = render_markdown(BODY).html

    assert '<a href="/road-trip-cost-calculator">calculator</a>' in html
    assert '<a href="https://www.nps.gov/" target="_blank" rel="noopener noreferrer">outside link</a>' in html


def test_raw_html_is_escaped() -> None:
    html = render_markdown("Hello <script>alert(1)</script>").html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_extract_toc_keeps_two_levels() -> None:
    assert extract_toc(BODY) == [
        TocEntry("route66", "Route 66 (Chicago to Los Angeles)", 1),
        TocEntry("budget-tips", "Budget Tips", 2),
        TocEntry("budget-tips-2", "Budget Tips", 1),
    ]
