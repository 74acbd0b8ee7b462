"""High-level queries against the site: search, pick and read."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from natoscrape.crawler import Crawler
from natoscrape.helpers import (
    NATOMANGA_URL,
    SEARCH_MANGA_BY_AUTHOR_URL,
    SEARCH_MANGA_BY_GENRE_URL,
    SEARCH_MANGA_URL,
    SPECIFIC_MANGA_URL,
    change_space_to_underscore,
)
from natoscrape.models import Author, Chapter, Genre, Manga, Page
from natoscrape.parsers import (
    parse_author,
    parse_genre_listing,
    parse_latest_updated,
    parse_manga_page,
    parse_pages,
    parse_search_results,
)

_MAX_WORKERS = 8

_SEARCHABLE_TYPES = (Manga, Author, Genre, Chapter, Page)


class PageNotFoundError(LookupError):
    """Raised when a query finds nothing."""

    def __init__(self, message: str = "this page does not exist or has been deleted") -> None:
        super().__init__(message)


class Searcher:
    """Fetches mangas, authors, genres and chapters from the site."""

    METHODS_DESCRIPTION = {
        "search_manga": "receives name of a manga user wants to search for and returns "
        "a list of mangas that match the name",
        "pick_manga": "receives the id of the specific manga then returns that manga if found",
        "read_manga_chapter": "receives the manga id and chapter id then returns pages "
        "of that specific chapter",
        "pick_author": "receives the id of the author then returns a list of mangas by him/her",
        "pick_genre": "receives genre id then returns a list of mangas with that genre",
        "search_latest_updated_manga": "returns list of latest updated mangas from the "
        "first page of " + NATOMANGA_URL,
        "is_searchable": "returns whether the object is one of the searchable record types",
    }

    def __init__(self, crawler: Crawler | None = None) -> None:
        self.crawler = crawler if crawler is not None else Crawler()
        self.methods_description = dict(self.METHODS_DESCRIPTION)

    def _fetch(self, url: str) -> str:
        return self.crawler.fetch(url) or ""

    def _author_of(self, manga: Manga) -> Author | None:
        html = self.crawler.fetch(SPECIFIC_MANGA_URL + manga.id)
        return parse_author(html) if html else None

    def _fill_authors(self, mangas: list[Manga]) -> None:
        workers = min(_MAX_WORKERS, len(mangas)) or 1
        with ThreadPoolExecutor(max_workers=workers) as pool:
            authors = list(pool.map(self._author_of, mangas))
        for manga, author in zip(mangas, authors):
            if author is not None:
                manga.author = author

    def search_manga(self, name: str) -> list[Manga]:
        """Mangas whose name matches ``name``, with id, name, author and update time."""
        url = SEARCH_MANGA_URL + change_space_to_underscore(name)
        mangas = parse_search_results(self._fetch(url))
        if not mangas:
            raise PageNotFoundError()
        self._fill_authors(mangas)
        return mangas

    def pick_manga(self, manga_id: str) -> Manga:
        """Every detail of the manga with ``manga_id``."""
        manga = parse_manga_page(self._fetch(SPECIFIC_MANGA_URL + manga_id), manga_id)
        if manga.is_blank():
            raise PageNotFoundError()
        return manga

    def read_manga_chapter(self, manga_id: str, chapter_id: str) -> list[Page]:
        """Pages of one chapter, each with id and image URL."""
        chapter = Chapter(id=chapter_id, manga_id=manga_id)
        chapter.pages = parse_pages(self._fetch(chapter.url()))
        if not chapter.pages:
            raise PageNotFoundError()
        return chapter.pages

    def pick_author(self, author_id: str) -> list[Manga]:
        """Mangas by the author with ``author_id``, with id, name, author and update time."""
        author = Author(id=author_id)
        author.mangas = parse_search_results(
            self._fetch(SEARCH_MANGA_BY_AUTHOR_URL + author_id)
        )
        if not author.mangas:
            raise PageNotFoundError()
        self._fill_authors(author.mangas)
        return author.mangas

    def pick_genre(self, genre_id: str) -> list[Manga]:
        """Mangas listed under the genre with ``genre_id``."""
        genre = Genre(id=genre_id)
        genre.mangas = parse_genre_listing(self._fetch(SEARCH_MANGA_BY_GENRE_URL + genre_id))
        if not genre.mangas:
            raise PageNotFoundError()
        return genre.mangas

    def search_latest_updated_manga(self) -> list[Manga]:
        """Latest updated mangas from the home page, with id, name and author name."""
        mangas = parse_latest_updated(self._fetch(NATOMANGA_URL))
        if not mangas:
            raise PageNotFoundError()
        return mangas

    def is_searchable(self, obj: object) -> bool:
        """True when ``obj`` is one of the record types that carry a site id."""
        return isinstance(obj, _SEARCHABLE_TYPES)