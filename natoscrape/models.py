"""Data records for mangas, authors, genres, chapters and pages."""

from __future__ import annotations

from dataclasses import dataclass, field

from natoscrape.helpers import SPECIFIC_MANGA_URL, get_id

_DESCRIPTION_PREFIX = "Description :\n"


@dataclass
class Page:
    """One image of a chapter."""

    id: str = ""
    image_url: str = ""


@dataclass
class Author:
    """A manga author, optionally with the mangas they wrote."""

    id: str = ""
    name: str = ""
    mangas: list[Manga] = field(default_factory=list)


@dataclass
class Genre:
    """A genre, optionally with the mangas listed under it."""

    id: str = ""
    name: str = ""
    mangas: list[Manga] = field(default_factory=list)


@dataclass
class Chapter:
    """A chapter of a manga."""

    id: str = ""
    manga_id: str = ""
    name: str = ""
    views: str = ""
    uploaded: str = ""
    pages: list[Page] = field(default_factory=list)

    def url(self) -> str:
        """Address of the chapter's reader page."""
        return f"{SPECIFIC_MANGA_URL}{self.manga_id}/chapter-{self.id}"


@dataclass
class Manga:
    """A manga and whatever details have been scraped for it."""

    id: str = ""
    name: str = ""
    alternatives: str = ""
    author: Author = field(default_factory=Author)
    status: str = ""
    updated: str = ""
    views: str = ""
    rating: str = ""
    description: str = ""
    genres: list[Genre] = field(default_factory=list)
    chapters: list[Chapter] = field(default_factory=list)

    def is_blank(self) -> bool:
        """True when nothing but the id has been filled in."""
        return self == Manga(id=self.id)


def page_id_from_url(url: str) -> str:
    """Return the image file name of ``url`` without its four-character extension."""
    name = get_id(url, "/")
    if len(name) < 4:
        raise ValueError(f"image name too short to carry an extension: {name!r}")
    return name[:-4]


def format_description(desc: str) -> str:
    """Strip surrounding newlines and the leading 'Description :' label."""
    desc = desc.strip("\n")
    return desc.removeprefix(_DESCRIPTION_PREFIX)


def format_rating(rating: str) -> str:
    """Drop the three leading words of the rating line and rejoin the rest."""
    words = rating.split()
    if len(words) < 3:
        raise ValueError(f"unexpected rating text: {rating!r}")
    return " ".join(words[3:])