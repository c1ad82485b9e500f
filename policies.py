from abc import ABC, abstractmethod
from dataclasses import dataclass

from dto import WordItem


@dataclass(frozen=True)
class Columns:
    japanese: int | None
    english: int | None
    chapter: int | None


def find_column(header: list[str], name: str) -> int | None:
    """Index of the first header cell containing `name`, ignoring case."""
    for i, cell in enumerate(header):
        if name in cell.lower():
            return i
    return None


def resolve_columns(header: list[str]) -> Columns:
    return Columns(
        japanese=find_column(header, 'japanese'),
        english=find_column(header, 'english'),
        chapter=find_column(header, 'chapter'),
    )


class CsvPolicy(ABC):
    @abstractmethod
    def resolve_columns(self, header: list[str]) -> Columns:
        pass

    @abstractmethod
    def accept_row(self, item: WordItem) -> bool:
        pass


class StrictPolicy(CsvPolicy):
    """Requires both the japanese and english columns; keeps every row,
    even when its japanese or english cell is empty."""

    def resolve_columns(self, header: list[str]) -> Columns:
        columns = resolve_columns(header)
        if columns.japanese is None or columns.english is None:
            raise MissingRequiredColumnError(
                'CSV file must have "japanese" and "english" columns'
            )
        return columns

    def accept_row(self, item: WordItem) -> bool:
        return True


class LenientPolicy(CsvPolicy):
    """Reads a missing column as empty cells and drops rows without both a
    japanese and an english value."""

    def resolve_columns(self, header: list[str]) -> Columns:
        return resolve_columns(header)

    def accept_row(self, item: WordItem) -> bool:
        return item.is_complete


def get_policy(strict: bool) -> CsvPolicy:
    return StrictPolicy() if strict else LenientPolicy()


class MissingRequiredColumnError(Exception):
    pass
