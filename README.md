# natoscrape

A small library for reading manga data from the natomanga.com site: search
results, manga details, chapter lists, chapter page images, author listings,
genre listings and the latest updates on the front page.

## Installation

```
pip install natoscrape
```

## Usage

```python
from natoscrape.crawler import Crawler
from natoscrape.searcher import Searcher, PageNotFoundError

with Crawler() as crawler:
    searcher = Searcher(crawler)

    # Search by title; runs of whitespace become underscores in the search URL.
    # The author of each result is looked up from its manga page.
    for manga in searcher.search_manga("chainsaw man"):
        print(manga.id, manga.name, manga.author.name, manga.updated)

    # Full details for one manga: name, alternatives, status, updated, views,
    # rating, description, genres, chapters and author.
    manga = searcher.pick_manga("dn980422")
    for chapter in manga.chapters:
        print(chapter.id, chapter.name, chapter.uploaded, chapter.url())

    # Image URLs for the pages of one chapter.
    for page in searcher.read_manga_chapter("dn980422", "97"):
        print(page.id, page.image_url)

    # Listings by author, by genre, and the latest updates.
    by_author = searcher.pick_author("fHx0YXRzdWtpX2Z1amltb3Rv")
    by_genre = searcher.pick_genre("2")
    latest = searcher.search_latest_updated_manga()

    try:
        searcher.pick_genre("abc")
    except PageNotFoundError as exc:
        print(exc)
```

`Searcher()` with no argument makes its own `Crawler`. A short description of
each query is kept in `Searcher.methods_description`, and
`Searcher.is_searchable(obj)` tells whether an object is one of the record
types (`Manga`, `Author`, `Genre`, `Chapter`, `Page`).

### Errors

Every query raises `PageNotFoundError` (a `LookupError`) when the page it reads
yields nothing. `Crawler.fetch` returns `None` rather than raising when a URL
lies outside the site's domains or the request fails; the failure is logged
through the `natoscrape.crawler` logger, and the query then ends in
`PageNotFoundError`.

### Parsing HTML yourself

The HTML parsing lives in `natoscrape.parsers` — `parse_search_results`,
`parse_latest_updated`, `parse_genre_listing`, `parse_manga_page`,
`parse_author`, `parse_genres`, `parse_chapters` and `parse_pages` — so pages
fetched some other way can be turned into the dataclasses of
`natoscrape.models` directly. `natoscrape.helpers` holds the site URLs and the
small `get_id` and `change_space_to_underscore` helpers.

## What it does not do

There is no command-line program; the package is a library only. It fetches
plain HTML with `requests` and does not run JavaScript, download page images,
cache results or store anything.

## Running the tests

```
pip install -e ".[test]"
pytest
```