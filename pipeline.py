#!/usr/bin/env python3

import argparse
import os
import random
import sys
from io import TextIOWrapper
from typing import Sequence

from dotenv import load_dotenv

from csv_parser import MissingRequiredColumnError, parse_csv
from pager import build_pages
from remote import DEFAULT_TIMEOUT, FetchError, fetch_csv_text
from renderer import output_filename, render_html

DEFAULT_TITLE = 'mikan テスト'


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    args = parse_args(argv)

    try:
        text = read_input(args)
    except (FetchError, InputError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not text.strip():
        print('Error: no input text provided', file=sys.stderr)
        return 1

    try:
        items = parse_csv(text, strict=args.strict)
    except MissingRequiredColumnError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    print(f'Parsed {len(items)} words')

    if args.dry_run == 'parse':
        print('Dry run: parsed words')
        print('\n'.join([item.to_str() for item in items]))
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    pages = build_pages(items, args.default_chapter, args.shuffle, rng)

    if len(pages) == 0:
        print('Error: no pages to output, load a CSV file with words', file=sys.stderr)
        return 1

    print(f'Built {len(pages)} pages')

    if args.dry_run == 'pages':
        print('Dry run: pages')
        for number, page in enumerate(pages, start=1):
            print(f'{number}. {page.to_str()}')
            for item in page.items:
                print(f'   {item.japanese} - {item.english}')
        return 0

    output = args.output or output_filename(args.title)
    with open(output, 'w', encoding='utf-8') as out_file:
        out_file.write(render_html(pages, args.title, args.answer_key))

    print(f'Wrote {output}, open it in a browser and print it (Ctrl+P / Cmd+P)')
    return 0


def read_input(args: argparse.Namespace) -> str:
    if args.url is not None:
        timeout = fetch_timeout()
        print(f'Fetching {args.url}...')
        return fetch_csv_text(args.url, timeout=timeout)

    input_file: TextIOWrapper = args.input_file
    try:
        return input_file.read()
    except UnicodeDecodeError as e:
        name = getattr(input_file, 'name', '<stdin>')
        raise InputError(f'{name} is not UTF-8 text') from e


def fetch_timeout() -> float:
    value = os.getenv('WORDTEST_FETCH_TIMEOUT', '').strip()
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError as e:
        raise InputError(
            f'WORDTEST_FETCH_TIMEOUT must be a number of seconds, got "{value}"'
        ) from e


def parse_args(argv: Sequence[str] | None = None):
    parser = argparse.ArgumentParser(
        description='Build a printable A4 word test from a japanese/english CSV'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--input-file',
        nargs='?',
        type=argparse.FileType('r', encoding='utf-8'),
        default=sys.stdin,
    )
    source.add_argument('--url', type=str, default=None)
    parser.add_argument(
        '--title', type=str, default=os.getenv('WORDTEST_TITLE', DEFAULT_TITLE)
    )
    parser.add_argument(
        '--default-chapter',
        type=str,
        default=os.getenv('WORDTEST_DEFAULT_CHAPTER', ''),
    )
    parser.add_argument('--shuffle', action='store_true')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--answer-key', action='store_true')
    # fail on a bad header and keep incomplete rows instead of dropping them
    parser.add_argument('--strict', action='store_true')
    parser.add_argument('--output', type=str, default=None)
    parser.add_argument(
        '--dry-run',
        type=str,
        nargs='?',
        choices=['parse', 'pages'],
        const='pages',
        default=None,
    )
    return parser.parse_args(argv)


class InputError(Exception):
    pass


if __name__ == '__main__':
    sys.exit(main())
