"""Site addresses and small string helpers shared by the scraper."""

NATOMANGA_HOST = "natomanga.com"
NATOMANGA_URL = "https://" + NATOMANGA_HOST
READ_NATOMANGA_HOST = "chap" + NATOMANGA_HOST
READ_NATOMANGA_URL = "https://" + READ_NATOMANGA_HOST
SEARCH_MANGA_URL = NATOMANGA_URL + "/search/story/"
SPECIFIC_MANGA_URL = READ_NATOMANGA_URL + "/manga-"
SEARCH_MANGA_BY_AUTHOR_URL = NATOMANGA_URL + "/author/story/"
SEARCH_MANGA_BY_GENRE_URL = NATOMANGA_URL + "/genre-"


def get_id(url: str, sep: str) -> str:
    """Return the part of ``url`` after the last ``sep``.

    Raises ValueError when ``sep`` is empty.
    """
    return url.split(sep)[-1]


def change_space_to_underscore(s: str) -> str:
    """Collapse runs of whitespace into single underscores and trim the ends."""
    return "_".join(s.split())