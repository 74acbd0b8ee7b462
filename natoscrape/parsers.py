"""Extract mangas, authors, genres, chapters and pages from site HTML."""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from natoscrape.helpers import get_id
from natoscrape.models import (
    Author,
    Chapter,
    Genre,
    Manga,
    Page,
    format_description,
    format_rating,
    page_id_from_url,
)

Markup = str | bytes


def _soup(html: Markup) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _child_text(element: Tag, selector: str) -> str:
    """Joined text of every match below ``element``, trimmed."""
    return "".join(found.get_text() for found in element.select(selector)).strip()


def _child_attr(element: Tag, selector: str, attr: str) -> str:
    """Attribute of the first match below ``element``, or an empty string."""
    found = element.select_one(selector)
    if found is None:
        return ""
    value = found.get(attr, "")
    return value if isinstance(value, str) else " ".join(value)


def _attr(element: Tag, attr: str) -> str:
    value = element.get(attr, "")
    return value if isinstance(value, str) else " ".join(value)


def _search_results(soup: BeautifulSoup) -> list[Manga]:
    return [
        Manga(
            id=get_id(_child_attr(item, "a.item-img", "href"), "-"),
            name=_child_text(item, ".item-right a.item-title"),
            updated=_child_text(item, ".item-right span.item-author+span"),
        )
        for item in soup.select(".search-story-item")
    ]


def parse_search_results(html: Markup) -> list[Manga]:
    """Mangas of a search or author listing: id, name and update time."""
    return _search_results(_soup(html))


def parse_latest_updated(html: Markup) -> list[Manga]:
    """Mangas on the home page: id, name and author name."""
    anchor = ".content-homepage-item-right h3 a"
    return [
        Manga(
            id=get_id(_child_attr(item, anchor, "href"), "-"),
            name=_child_text(item, anchor),
            author=Author(
                name=_child_text(item, ".content-homepage-item-right .item-author")
            ),
        )
        for item in _soup(html).select(".content-homepage-item")
    ]


def parse_genre_listing(html: Markup) -> list[Manga]:
    """Mangas of a genre page: id, name, views, update time, author name, description."""
    anchor = "h3 a.genres-item-name"
    info = "p.genres-item-view-time"
    return [
        Manga(
            id=get_id(_child_attr(item, anchor, "href"), "-"),
            name=_child_text(item, anchor),
            views=_child_text(item, f"{info} span.genres-item-view"),
            updated=_child_text(item, f"{info} span.genres-item-time"),
            author=Author(name=_child_text(item, f"{info} span.genres-item-author")),
            description=_child_text(item, "div.genres-item-description"),
        )
        for item in _soup(html).select(".content-genres-item")
    ]


def _author(soup: BeautifulSoup) -> Author | None:
    row = _last(soup.select(".variations-tableInfo tr:nth-child(2)"))
    if row is None:
        return None
    return Author(
        id=get_id(_child_attr(row, "a", "href"), "/"),
        name=_child_text(row, "td.table-value"),
    )


def parse_author(html: Markup) -> Author | None:
    """Author named on a manga page, or None when the page shows none."""
    return _author(_soup(html))


def _genres(soup: BeautifulSoup) -> list[Genre]:
    return [
        Genre(id=get_id(_attr(link, "href"), "-"), name=link.get_text())
        for link in soup.select("tr:nth-child(4) .table-value a.a-h")
    ]


def parse_genres(html: Markup) -> list[Genre]:
    """Genres listed on a manga page."""
    return _genres(_soup(html))


def _chapters(soup: BeautifulSoup, manga_id: str) -> list[Chapter]:
    return [
        Chapter(
            id=get_id(_child_attr(item, "a.chapter-name", "href"), "-"),
            manga_id=manga_id,
            name=_child_text(item, "a.chapter-name"),
            views=_child_text(item, "span.chapter-view"),
            uploaded=_child_text(item, "span.chapter-time"),
        )
        for item in soup.select(".row-content-chapter li.a-h")
    ]


def parse_chapters(html: Markup, manga_id: str) -> list[Chapter]:
    """Chapters listed on a manga page, each tied to ``manga_id``."""
    return _chapters(_soup(html), manga_id)


def _last(elements: Sequence[Tag]) -> Tag | None:
    """The final element, since later matches overwrite earlier ones."""
    return elements[-1] if elements else None


def parse_manga_page(html: Markup, manga_id: str) -> Manga:
    """Every detail of a manga page; fields the page lacks stay empty."""
    soup = _soup(html)
    manga = Manga(id=manga_id)

    if (info := _last(soup.select(".story-info-right"))) is not None:
        manga.name = _child_text(info, "h1")

    if (table := _last(soup.select(".variations-tableInfo"))) is not None:
        manga.alternatives = _child_text(table, "tr:nth-child(1) .table-value")
        manga.status = _child_text(table, "tr:nth-child(3) .table-value")

    if (extent := _last(soup.select(".story-info-right-extent"))) is not None:
        manga.rating = format_rating(_child_text(extent, "em#rate_row_cmd"))
        manga.updated = _child_text(extent, "p:nth-child(1) .stre-value")
        manga.views = _child_text(extent, "p:nth-child(2) .stre-value")

    if (desc := _last(soup.select(".panel-story-info-description"))) is not None:
        manga.description = format_description(desc.get_text())

    manga.genres = _genres(soup)
    manga.chapters = _chapters(soup, manga_id)
    if (author := _author(soup)) is not None:
        manga.author = author
    return manga


def parse_pages(html: Markup) -> list[Page]:
    """Images of a chapter reader page, in reading order."""
    pages = []
    for img in _soup(html).select(".container-chapter-reader img"):
        src = _attr(img, "src")
        pages.append(Page(id=page_id_from_url(src), image_url=src))
    return pages