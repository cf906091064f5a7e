"""
Drop table extraction from rendered wiki item pages.

The wiki lays out item pages inconsistently (heading text and column order
vary), but drop and shop tables carry stable CSS classes. Extraction keys off
those classes and reads one record per table row. Rows that do not have the
expected number of cells are skipped, and nothing in here raises on odd
markup: a page with no matching tables yields the fallback title and no
sources.

Extraction strategies are swappable through the PageExtractor protocol so a
new page layout can be supported without touching the orchestrator.
"""

import logging
import re
from typing import Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from osrs_drops.categorize import categorize
from osrs_drops.config import get_settings
from osrs_drops.models import DropSource
from osrs_drops.types import PageExtraction

log = logging.getLogger(__name__)

_HEADING_TAGS = ["h2", "h3", "h4"]


class PageExtractor(Protocol):
    name: str

    def extract(self, html: str, fallback_item_name: str) -> PageExtraction: ...


def _clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _cell_text(cell: Tag) -> str | None:
    return _clean_text(cell.get_text()) or None


def _heading_text(heading: Tag) -> str:
    headline = heading.find(class_="mw-headline")
    if isinstance(headline, Tag):
        return _clean_text(headline.get_text())
    for edit in heading.find_all(class_="mw-editsection"):
        edit.extract()
    return _clean_text(heading.get_text())


class TableClassExtractor:
    """
    Extracts drop sources from tables identified by their class attribute.

    Drop tables ("item-drops") are read as source, quantity, rarity, notes.
    Shop tables ("store-locations-list") are read as shop name and stock.
    """

    name = "table-class/v1"

    def __init__(
        self,
        wiki_origin: str | None = None,
        *,
        drop_table_class: str = "item-drops",
        shop_table_class: str = "store-locations-list",
        title_selector: str = "h1#firstHeading",
        no_drop_marker: str = "Nothing",
    ):
        self.wiki_origin = wiki_origin or get_settings().wiki_base_url
        self.drop_table_class = drop_table_class
        self.shop_table_class = shop_table_class
        self.title_selector = title_selector
        self.no_drop_marker = no_drop_marker

    def extract(self, html: str, fallback_item_name: str) -> PageExtraction:
        soup = BeautifulSoup(html or "", "html.parser")

        title_tag = soup.select_one(self.title_selector)
        item_title = (_clean_text(title_tag.get_text()) if title_tag else "") or fallback_item_name

        sources: list[DropSource] = []
        for table in soup.find_all("table", class_=self.drop_table_class):
            sources.extend(self._drop_rows(table))
        for table in soup.find_all("table", class_=self.shop_table_class):
            sources.extend(self._shop_rows(table))

        log.debug("Extracted %d sources for '%s' using %s", len(sources), item_title, self.name)
        return PageExtraction(item_title=item_title, sources=sources)

    def _link(self, cell: Tag) -> str | None:
        anchor = cell.find("a", href=True)
        if not isinstance(anchor, Tag):
            return None
        href = str(anchor["href"])
        if href.startswith("/"):
            return urljoin(self.wiki_origin, href)
        return href

    def _section_heading(self, table: Tag) -> str | None:
        heading = table.find_previous(_HEADING_TAGS)
        if not isinstance(heading, Tag):
            return None
        return _heading_text(heading) or None

    def _drop_rows(self, table: Tag) -> list[DropSource]:
        heading = self._section_heading(table)
        rows = []
        for row in table.find_all("tr"):
            cells = row.find_all("td", recursive=False)
            if len(cells) < 4:
                continue

            source_name = _cell_text(cells[0])
            if not source_name or source_name == self.no_drop_marker:
                continue

            source = DropSource.from_rarity(
                source_name,
                "monster",
                _cell_text(cells[2]),
                quantity=_cell_text(cells[1]),
                notes=_cell_text(cells[3]),
                wiki_url=self._link(cells[0]),
            )
            category = categorize(source_name, heading)
            if category is not None:
                source.type = category
            rows.append(source)
        return rows

    def _shop_rows(self, table: Tag) -> list[DropSource]:
        rows = []
        for row in table.find_all("tr"):
            cells = row.find_all("td", recursive=False)
            if len(cells) < 2:
                continue

            shop_name = _cell_text(cells[0])
            if not shop_name:
                continue

            rows.append(
                DropSource(
                    source_name=shop_name,
                    type="shop",
                    quantity=_cell_text(cells[1]),
                    wiki_url=self._link(cells[0]),
                )
            )
        return rows


def extract(
    html: str, fallback_item_name: str, extractor: PageExtractor | None = None
) -> PageExtraction:
    return (extractor or TableClassExtractor()).extract(html, fallback_item_name)
