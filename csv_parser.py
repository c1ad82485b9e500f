import re

from dto import WordItem, WordItems
from policies import CsvPolicy, MissingRequiredColumnError, get_policy

__all__ = ['MissingRequiredColumnError', 'parse_csv', 'split_csv_line']

BOM = '\ufeff'


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed cells.

    Minimal RFC 4180 handling: commas inside double quotes are kept, and a
    doubled quote inside a quoted field is a literal quote. Quotes are not
    required around plain fields.
    """
    result: list[str] = []
    cur = ''
    in_quotes = False
    i = 0
    while i < len(line):
        c = line[i]
        if c == '"':
            if in_quotes and line[i + 1 : i + 2] == '"':
                cur += '"'
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == ',' and not in_quotes:
            result.append(cur)
            cur = ''
        else:
            cur += c
        i += 1
    result.append(cur)
    return [s.strip() for s in result]


def normalize_text(text: str) -> str:
    return re.sub(r'\r\n?', '\n', text.removeprefix(BOM))


def _cell(row: list[str], index: int | None) -> str:
    if index is None or index >= len(row):
        return ''
    return row[index]


def parse_csv(
    text: str, strict: bool = False, policy: CsvPolicy | None = None
) -> WordItems:
    """Parse a word list with a `japanese,english[,chapter]` header.

    `strict` selects the policy: strict parsing fails on a header without
    the required columns and keeps incomplete rows; lenient parsing reads
    missing columns as empty and drops incomplete rows.
    """
    if policy is None:
        policy = get_policy(strict)

    lines = normalize_text(text).strip().split('\n')
    if len(lines) == 0 or not lines[0]:
        return []

    columns = policy.resolve_columns(split_csv_line(lines[0]))

    out: WordItems = []
    for line in lines[1:]:
        if not line.strip():
            continue
        row = split_csv_line(line)
        item = WordItem(
            japanese=_cell(row, columns.japanese),
            english=_cell(row, columns.english),
            chapter=_cell(row, columns.chapter).strip(),
        )
        if policy.accept_row(item):
            out.append(item)
    return out
