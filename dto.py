from dataclasses import dataclass


@dataclass(frozen=True)
class WordItem:
    japanese: str
    english: str
    chapter: str = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.japanese.strip()) and bool(self.english.strip())

    def to_str(self) -> str:
        return f'{self.chapter}:{self.japanese}:{self.english}'


@dataclass(frozen=True)
class Page:
    chapter: str
    items: tuple[WordItem, ...]

    def to_str(self) -> str:
        return f'{self.chapter}:{len(self.items)}'


WordItems = list[WordItem]
