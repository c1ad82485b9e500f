import random
from typing import Sequence, TypeVar

from dto import Page, WordItem

PAGE_SIZE = 12
CHAPTER_PLACEHOLDER = '(チャプター未設定)'

T = TypeVar('T')


def chapter_key(item: WordItem, default_chapter: str) -> str:
    return item.chapter.strip() or default_chapter.strip() or CHAPTER_PLACEHOLDER


def shuffle_items(items: Sequence[T], rng: random.Random) -> list[T]:
    # Fisher-Yates over a copy
    copy = list(items)
    for i in range(len(copy) - 1, 0, -1):
        j = rng.randrange(i + 1)
        copy[i], copy[j] = copy[j], copy[i]
    return copy


def group_by_chapter(
    items: Sequence[WordItem], default_chapter: str
) -> dict[str, list[WordItem]]:
    groups: dict[str, list[WordItem]] = {}
    for item in items:
        groups.setdefault(chapter_key(item, default_chapter), []).append(item)
    return groups


def build_pages(
    items: Sequence[WordItem],
    default_chapter: str = '',
    shuffle: bool = False,
    rng: random.Random | None = None,
) -> list[Page]:
    """Split items into pages of at most PAGE_SIZE, one run of pages per chapter.

    Chapters appear in the order they are first seen. When `shuffle` is set,
    items are permuted within their chapter using `rng`, or a freshly seeded
    generator if none is given.
    """
    if not items:
        return []

    groups = group_by_chapter(items, default_chapter)
    if shuffle:
        rng = rng or random.Random()
        groups = {chapter: shuffle_items(group, rng) for chapter, group in groups.items()}

    out: list[Page] = []
    for chapter, source in groups.items():
        for i in range(0, len(source), PAGE_SIZE):
            out.append(Page(chapter=chapter, items=tuple(source[i : i + PAGE_SIZE])))
    return out
