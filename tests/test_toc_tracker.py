import pytest

from mpgblog.widgets import Document, Element, TableOfContents, TocEntry

ITEMS = [
    TocEntry("intro", "Introduction", 1),
    TocEntry("fuel", "Fuel Costs", 1),
    TocEntry("fuel-tips", "Fuel Tips", 2),
    TocEntry("lodging", "Lodging", 1),
]


def _document() -> Document:
    return Document(
        [
            Element("intro", top=1000, height=40),
            Element("fuel", top=2000, height=40),
            Element("fuel-tips", top=2600, height=30),
            Element("lodging", top=3500, height=40),
        ],
        viewport_height=800,
    )


def test_nothing_active_before_any_section_enters_band() -> None:
    document = _document()
    toc = TableOfContents(ITEMS)
    toc.mount(document)

    assert toc.active_id is None
    document.scroll_to(500)
    assert toc.active_id is None


def test_section_entering_top_band_becomes_active() -> None:
    document = _document()
    toc = TableOfContents(ITEMS)
    toc.mount(document)

    document.scroll_to(990)
    assert toc.active_id == "intro"

    document.scroll_to(1980)
    assert toc.active_id == "fuel"

    # Below the top 20% of the viewport does not count.
    document.scroll_to(2300)
    assert toc.active_id == "fuel"

    document.scroll_to(2590)
    assert toc.active_id == "fuel-tips"


def test_active_section_stays_after_it_leaves_band() -> None:
    document = _document()
    toc = TableOfContents(ITEMS)
    toc.mount(document)

    document.scroll_to(990)
    document.scroll_to(1500)
    assert toc.active_id == "intro"


def test_section_already_in_band_at_mount() -> None:
    document = _document()
    document.scroll_to(1990)
    toc = TableOfContents(ITEMS)
    toc.mount(document)

    assert toc.active_id == "fuel"


def test_last_transition_wins_when_several_enter_together() -> None:
    document = Document([Element("a", top=100, height=10), Element("b", top=120, height=10)], viewport_height=1000)
    document.scroll_to(900)
    toc = TableOfContents([TocEntry("a", "A"), TocEntry("b", "B")])
    toc.mount(document)

    document.scroll_to(90)
    assert toc.active_id == "b"


def test_missing_sections_are_skipped() -> None:
    document = _document()
    toc = TableOfContents([TocEntry("missing", "Gone"), *ITEMS])

    observed = toc.mount(document)

    assert "missing" not in observed
    assert observed == [item.id for item in ITEMS]


@pytest.mark.parametrize("entry", ITEMS, ids=lambda item: item.id)
def test_click_scrolls_and_updates_fragment(entry: TocEntry) -> None:
    document = _document()
    toc = TableOfContents(ITEMS)
    toc.mount(document)

    assert toc.click(entry.id) is True

    assert document.scroll_y == document.get_element_by_id(entry.id).top
    assert document.last_scroll_behavior == "smooth"
    assert document.location_hash == f"#{entry.id}"
    assert document.history == [f"#{entry.id}"]
    assert toc.active_id == entry.id


def test_click_on_missing_section_does_nothing() -> None:
    document = _document()
    toc = TableOfContents([TocEntry("missing", "Gone")])
    toc.mount(document)

    assert toc.click("missing") is False
    assert document.history == []
    assert toc.active_id is None


def test_toggle_collapses_and_expands() -> None:
    toc = TableOfContents(ITEMS)
    assert toc.expanded is True
    assert toc.toggle() is False
    assert toc.toggle() is True


def test_unmount_releases_observation() -> None:
    document = _document()
    toc = TableOfContents(ITEMS)
    toc.mount(document)
    assert document.listener_count("scroll") == 1

    toc.unmount()

    assert document.listener_count("scroll") == 0
    document.scroll_to(990)
    assert toc.active_id is None


def test_level_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TocEntry("x", "X", level=0)
