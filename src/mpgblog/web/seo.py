"""
sitemap.xml and robots.txt generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List
from xml.etree import ElementTree as ET

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
ROBOTS_DISALLOW = ("/embed/", "/private/", "/api/")


@dataclass(frozen=True)
class SitemapEntry:
    """
    One <url> element.

    Attributes:
        path: Site-relative path ("" or "/" for the home page).
        last_modified: Date of the last change.
        change_frequency: "daily", "weekly", "monthly", ...
        priority: Relative priority between 0.0 and 1.0.
    """
    path: str
    last_modified: date
    change_frequency: str = "weekly"
    priority: float = 0.5

    def location(self, origin: str) -> str:
        path = self.path if self.path.startswith("/") or not self.path else f"/{self.path}"
        return f"{origin}{'' if path == '/' else path}"


def build_sitemap(entries: Iterable[SitemapEntry], origin: str) -> str:
    ET.register_namespace("", SITEMAP_NS)
    urlset = ET.Element(f"{{{SITEMAP_NS}}}urlset")
    for entry in entries:
        url = ET.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        ET.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = entry.location(origin)
        ET.SubElement(url, f"{{{SITEMAP_NS}}}lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url, f"{{{SITEMAP_NS}}}changefreq").text = entry.change_frequency
        ET.SubElement(url, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:.1f}"
    ET.indent(urlset, space="  ")
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def sitemap_urls(sitemap_xml: str) -> List[str]:
    """Extract every <loc> value from a sitemap document."""
    root = ET.fromstring(sitemap_xml)
    return [loc.text.strip() for loc in root.iter(f"{{{SITEMAP_NS}}}loc") if loc.text]


def build_robots(origin: str, admin_path: str) -> str:
    disallow = list(ROBOTS_DISALLOW)
    disallow.append(f"/{admin_path}/")
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in disallow)
    lines.append("")
    lines.append(f"Sitemap: {origin}/sitemap.xml")
    return "\n".join(lines) + "\n"
