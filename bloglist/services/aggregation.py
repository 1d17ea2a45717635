"""
Statistics over a collection of blog records.

Every function here is pure and accepts anything exposing ``author`` and
``likes`` attributes (``BlogDB``, ``BlogWithOwner``) or a mapping with those
keys. A record without ``likes`` counts as zero likes. Ties are resolved in
favour of whatever was encountered first: the earliest record for
``favorite_blog`` and the author who appears earliest for ``most_blogs`` and
``most_likes``.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from bloglist.schemas.stats import AuthorBlogCount, AuthorLikes


def _field(record: object, name: str, default: Any) -> Any:
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def likes_of(record: object) -> int:
    """Return the record's likes, 0 when absent."""
    return int(_field(record, "likes", 0))


def author_of(record: object) -> str:
    return str(_field(record, "author", ""))


def total_likes(records: Sequence[object]) -> int:
    """
    Sum the likes of all records.

    Args:
        records: Blog records

    Returns:
        int: Total likes, 0 for an empty sequence
    """
    return sum(likes_of(record) for record in records)


def favorite_blog[T](records: Sequence[T]) -> T | None:
    """
    Find the record with the most likes.

    Args:
        records: Blog records

    Returns:
        The most liked record (the first one among equals), or None when empty
    """
    best: T | None = None
    best_likes = 0
    for record in records:
        likes = likes_of(record)
        if best is None or likes > best_likes:
            best, best_likes = record, likes
    return best


def _largest_group(totals: dict[str, int]) -> tuple[str, int] | None:
    # dicts keep insertion order, so the first author seen wins a tie
    winner: tuple[str, int] | None = None
    for author, total in totals.items():
        if winner is None or total > winner[1]:
            winner = (author, total)
    return winner


def most_blogs(records: Sequence[object]) -> AuthorBlogCount | None:
    """
    Find the author with the most blogs.

    Authors are compared with exact, case-sensitive string equality.

    Args:
        records: Blog records

    Returns:
        AuthorBlogCount | None: Author and blog count, or None when empty
    """
    counts: dict[str, int] = {}
    for record in records:
        author = author_of(record)
        counts[author] = counts.get(author, 0) + 1

    winner = _largest_group(counts)
    if winner is None:
        return None
    return AuthorBlogCount(author=winner[0], count=winner[1])


def most_likes(records: Sequence[object]) -> AuthorLikes | None:
    """
    Find the author whose blogs have the most likes in total.

    Args:
        records: Blog records

    Returns:
        AuthorLikes | None: Author and summed likes, or None when empty
    """
    sums: dict[str, int] = {}
    for record in records:
        author = author_of(record)
        sums[author] = sums.get(author, 0) + likes_of(record)

    winner = _largest_group(sums)
    if winner is None:
        return None
    return AuthorLikes(author=winner[0], likes=winner[1])


@dataclass(frozen=True, slots=True)
class BlogStatistics[R]:
    """All four aggregates computed over one snapshot of records."""

    total_likes: int
    favorite_blog: R | None
    most_blogs: AuthorBlogCount | None
    most_likes: AuthorLikes | None


def summarize[R](records: Sequence[R]) -> BlogStatistics[R]:
    """Compute every aggregate over ``records``."""
    return BlogStatistics(
        total_likes=total_likes(records),
        favorite_blog=favorite_blog(records),
        most_blogs=most_blogs(records),
        most_likes=most_likes(records),
    )
