import pytest

from mpgblog.config import settings
from mpgblog.widgets import (
    SHARE_TARGETS,
    build_share_links,
    encode_uri_component,
    resolve_share_url,
    share_links_by_key,
)

ORIGIN = "https://example.com"
ENCODED_URL = "https%3A%2F%2Fexample.com%2Fblog%2Fx"


def test_every_service_embeds_encoded_absolute_url() -> None:
    links = build_share_links("/blog/x", "T", origin=ORIGIN)

    assert [link.key for link in links] == [target.key for target in SHARE_TARGETS]
    for link in links:
        assert ENCODED_URL in link.href, link.key
        assert link.target == "_blank"
        assert link.rel == "noopener noreferrer"


def test_service_templates() -> None:
    links = share_links_by_key("/blog/x", "T", "About X", origin=ORIGIN)

    assert links["twitter"] == f"https://twitter.com/intent/tweet?text=T&url={ENCODED_URL}"
    assert links["facebook"] == f"https://www.facebook.com/sharer/sharer.php?u={ENCODED_URL}"
    assert links["linkedin"] == f"https://www.linkedin.com/sharing/share-offsite/?url={ENCODED_URL}"
    assert links["pinterest"] == f"https://pinterest.com/pin/create/button/?url={ENCODED_URL}&media=&description=T"
    assert links["reddit"] == f"https://www.reddit.com/submit?url={ENCODED_URL}&title=T"
    assert links["whatsapp"] == f"https://api.whatsapp.com/send?text=T%20{ENCODED_URL}"
    assert links["email"] == f"mailto:?subject=T&body=About%20X%0A%0A{ENCODED_URL}"


def test_encode_matches_encode_uri_component() -> None:
    assert encode_uri_component("Route 66: $350 & up!") == "Route%2066%3A%20%24350%20%26%20up!"
    assert encode_uri_component("it's (fun) ~*") == "it's%20(fun)%20~*"


def test_default_origin_when_unset() -> None:
    assert resolve_share_url("/blog/x") == "https://mpgcalculator.net/blog/x"


def test_origin_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SITE_URL", "https://staging.example.org/")
    settings.get_settings.cache_clear()

    assert resolve_share_url("/blog/x") == "https://staging.example.org/blog/x"
