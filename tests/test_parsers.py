import pytest

from natoscrape.models import Author, Manga
from natoscrape.parsers import (
    parse_author,
    parse_chapters,
    parse_genre_listing,
    parse_genres,
    parse_latest_updated,
    parse_manga_page,
    parse_pages,
    parse_search_results,
)

MANGA_ID = "dn980422"
AUTHOR_ID = "fHx0YXRzdWtpX2Z1amltb3Rv"
FIRST_PAGE_URL = (
    "https://v11.mkklcdnv6tempv4.com/img/tab_11/02/90/65/dn980422/"
    "chapter_97_love_love_chainsaw/1-n.jpg"
)
SECOND_PAGE_URL = (
    "https://v11.mkklcdnv6tempv4.com/img/tab_11/02/90/65/dn980422/"
    "chapter_97_love_love_chainsaw/2-n.jpg"
)

SEARCH_HTML = """
<div class="panel-search-story">
  <div class="search-story-item">
    <a class="item-img" href="https://chapnatomanga.com/manga-dn980422"><img src="c.jpg"></a>
    <div class="item-right">
      <h3><a class="item-title" href="https://chapnatomanga.com/manga-dn980422">Chainsaw Man</a></h3>
      <span class="item-author">Tatsuki Fujimoto</span>
      <span class="item-time">Updated : Jun 01,2021</span>
    </div>
  </div>
  <div class="search-story-item">
    <a class="item-img" href="https://chapnatomanga.com/manga-ab123"><img src="d.jpg"></a>
    <div class="item-right">
      <h3><a class="item-title" href="https://chapnatomanga.com/manga-ab123">Other Title</a></h3>
      <span class="item-author">Someone</span>
      <span class="item-time">Updated : Jan 02,2020</span>
    </div>
  </div>
</div>
"""

LATEST_HTML = """
<div class="content-homepage-item">
  <div class="content-homepage-item-right">
    <h3><a href="https://chapnatomanga.com/manga-dn980422">Chainsaw Man</a></h3>
    <span class="item-author">Tatsuki Fujimoto</span>
  </div>
</div>
"""

GENRE_LISTING_HTML = """
<div class="content-genres-item">
  <div class="genres-item-info">
    <h3><a class="genres-item-name" href="https://chapnatomanga.com/manga-dn980422">Chainsaw Man</a></h3>
    <p class="genres-item-view-time">
      <span class="genres-item-view">100M</span>
      <span class="genres-item-time">Jun 01,21</span>
      <span class="genres-item-author">Tatsuki Fujimoto</span>
    </p>
    <div class="genres-item-description"> Denji has a debt. </div>
  </div>
</div>
"""

MANGA_HTML = """
<div class="panel-story-info">
  <div class="story-info-right">
    <h1>Chainsaw Man</h1>
    <table class="variations-tableInfo"><tbody>
      <tr><td class="table-label">Alternative :</td>
          <td class="table-value"><h2>Chainsawman, チェンソーマン</h2></td></tr>
      <tr><td class="table-label">Author(s) :</td>
          <td class="table-value"><a class="a-h" href="https://natomanga.com/author/story/fHx0YXRzdWtpX2Z1amltb3Rv">Tatsuki Fujimoto</a></td></tr>
      <tr><td class="table-label">Status :</td><td class="table-value">Ongoing</td></tr>
      <tr><td class="table-label">Genres :</td>
          <td class="table-value"><a class="a-h" href="https://natomanga.com/genre-2">Action</a> - <a class="a-h" href="https://natomanga.com/genre-4">Adventure</a></td></tr>
    </tbody></table>
    <div class="story-info-right-extent">
      <p><span class="stre-label">Updated :</span><span class="stre-value">Jun 01,2021</span></p>
      <p><span class="stre-label">View :</span><span class="stre-value">100M</span></p>
      <p><em id="rate_row_cmd">MangaNato.com rate : 4.6 / 5 from 1234 votes</em></p>
    </div>
  </div>
  <div class="panel-story-info-description">
Description :
Denji has a debt.
</div>
</div>
<ul class="row-content-chapter">
  <li class="a-h"><a class="chapter-name" href="https://chapnatomanga.com/manga-dn980422/chapter-97">Chapter 97</a>
    <span class="chapter-view">1M</span><span class="chapter-time">Jun 01,21</span></li>
  <li class="a-h"><a class="chapter-name" href="https://chapnatomanga.com/manga-dn980422/chapter-96">Chapter 96</a>
    <span class="chapter-view">2M</span><span class="chapter-time">May 25,21</span></li>
</ul>
"""

PAGES_HTML = f"""
<div class="container-chapter-reader">
  <img src="{FIRST_PAGE_URL}" alt="page 1">
  <img src="{SECOND_PAGE_URL}" alt="page 2">
</div>
"""


def test_parse_search_results_fields():
    mangas = parse_search_results(SEARCH_HTML)
    assert [m.id for m in mangas] == [MANGA_ID, "ab123"]
    assert mangas[0].name == "Chainsaw Man"
    assert mangas[0].updated == "Updated : Jun 01,2021"
    assert mangas[0].author == Author()


def test_parse_search_results_accepts_bytes():
    assert parse_search_results(SEARCH_HTML.encode()) == parse_search_results(SEARCH_HTML)


@pytest.mark.parametrize(
    "parser",
    [parse_search_results, parse_latest_updated, parse_genre_listing, parse_pages],
)
def test_listing_parsers_return_empty_for_unrelated_page(parser):
    assert parser("<html><body><p>404</p></body></html>") == []


def test_parse_latest_updated_fields():
    mangas = parse_latest_updated(LATEST_HTML)
    assert mangas == [
        Manga(id=MANGA_ID, name="Chainsaw Man", author=Author(name="Tatsuki Fujimoto"))
    ]


def test_parse_genre_listing_fields():
    (manga,) = parse_genre_listing(GENRE_LISTING_HTML)
    assert manga.id == MANGA_ID
    assert manga.name == "Chainsaw Man"
    assert manga.views == "100M"
    assert manga.updated == "Jun 01,21"
    assert manga.author.name == "Tatsuki Fujimoto"
    assert manga.description == "Denji has a debt."


def test_parse_author():
    assert parse_author(MANGA_HTML) == Author(id=AUTHOR_ID, name="Tatsuki Fujimoto")


def test_parse_author_absent_is_none():
    assert parse_author("<div>nothing</div>") is None


def test_parse_genres():
    genres = parse_genres(MANGA_HTML)
    assert [(g.id, g.name) for g in genres] == [("2", "Action"), ("4", "Adventure")]


def test_parse_chapters():
    chapters = parse_chapters(MANGA_HTML, MANGA_ID)
    assert [c.id for c in chapters] == ["97", "96"]
    assert all(c.manga_id == MANGA_ID for c in chapters)
    assert chapters[0].name == "Chapter 97"
    assert chapters[0].views == "1M"
    assert chapters[0].uploaded == "Jun 01,21"


def test_parse_manga_page_full():
    manga = parse_manga_page(MANGA_HTML, MANGA_ID)
    assert manga.id == MANGA_ID
    assert manga.name == "Chainsaw Man"
    assert manga.alternatives == "Chainsawman, チェンソーマン"
    assert manga.status == "Ongoing"
    assert manga.updated == "Jun 01,2021"
    assert manga.views == "100M"
    assert manga.rating == "4.6 / 5 from 1234 votes"
    assert manga.description == "Denji has a debt."
    assert manga.author == parse_author(MANGA_HTML)
    assert manga.genres == parse_genres(MANGA_HTML)
    assert manga.chapters == parse_chapters(MANGA_HTML, MANGA_ID)
    assert manga.is_blank() is False


def test_parse_manga_page_missing_page_is_blank():
    manga = parse_manga_page("<html><body>gone</body></html>", "to70571")
    assert manga.is_blank() is True
    assert manga.id == "to70571"


def test_parse_pages():
    pages = parse_pages(PAGES_HTML)
    assert len(pages) == 2
    assert pages[0].image_url == FIRST_PAGE_URL
    assert pages[0].id == "1-n"
    assert pages[1].image_url == SECOND_PAGE_URL
    assert all(p.image_url.endswith(p.id + ".jpg") for p in pages)