from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from mpgblog.config import settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep SITE_URL/INDEXNOW_KEY from the host environment out of tests."""
    monkeypatch.delenv("SITE_URL", raising=False)
    monkeypatch.delenv("INDEXNOW_KEY", raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


def write_article(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(textwrap.dedent(body).lstrip("\n"), encoding="utf-8")
    return path


@pytest.fixture
def sample_site(tmp_path: Path) -> dict:
    """
    Write a small site configuration plus three articles and return metadata.
    """
    web_root = tmp_path / "public"
    content_dir = tmp_path / "content"
    write_article(
        content_dir / "road-trips",
        "route-66.md",
        """
        +++
        title = "Route 66 on a Budget"
        description = "What it costs to drive the Mother Road."
        category = "road-trips"
        published_at = 2025-06-01
        tags = ["Road Trips"]
        key_takeaways = ["Fuel is the biggest line item"]
        +++
        Intro paragraph.

        ## Fuel Costs {#fuel}

        About **$350** in fuel.

        ## Where to Stay

        Independent motels.

        ### Booking Tips

        Book early.
        """,
    )
    write_article(
        content_dir / "road-trips",
        "pacific-coast.md",
        """
        +++
        title = "Pacific Coast Highway Costs"
        description = "Budgeting the PCH."
        category = "road-trips"
        published_at = 2025-05-01
        +++
        ## Overview

        Ocean views.
        """,
    )
    write_article(
        content_dir / "vehicles",
        "tire-pressure.md",
        """
        +++
        title = "Tire Pressure and MPG"
        category = "vehicles"
        published_at = 2025-04-01
        +++
        ## Why It Matters

        Rolling resistance.
        """,
    )
    config_text = textwrap.dedent(
        f"""
        site_name = "Test Blog"
        web_root = "{web_root}"
        content_dir = "{content_dir}"

        [[category]]
        slug = "road-trips"
        title = "Road Trip Guides"
        description = "Routes and costs."

        [[category]]
        slug = "vehicles"
        title = "Vehicle Guides"
        description = "Efficiency advice."

        [[tool]]
        name = "Road Trip Cost Calculator"
        href = "/road-trip-cost-calculator"
        description = "Plan your journey costs"
        """
    ).strip()
    path = tmp_path / "site.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return {"path": path, "web_root": web_root, "content_dir": content_dir}
