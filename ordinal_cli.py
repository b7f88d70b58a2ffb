import argparse
import csv
import os
import sys

from ordinals import OutOfRange, digit_ordinal, word_ordinal


def table_rows(start, stop):
    for value in range(start, stop + 1):
        yield (str(value), digit_ordinal(value), word_ordinal(value))


def _write_rows(handle, rows):
    writer = csv.writer(handle)
    count = 0
    for row in rows:
        writer.writerow(row)
        count += 1
    return count


def write_table(rows, path=None):
    if path is None:
        return _write_rows(sys.stdout, rows)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as handle:
        return _write_rows(handle, rows)


def spell(value):
    words = word_ordinal(value)
    print(f"Number: {value}")
    print(f"Digits: {digit_ordinal(value)}")
    print(f"Words: {words}")
    print(f"Length: {len(words)}")


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    if args.digits is not None:
        print(digit_ordinal(args.digits))
        return

    if args.spell is not None:
        try:
            spell(args.spell)
        except OutOfRange as exc:
            parser.error(str(exc))
        return

    if args.table is not None:
        start, stop = args.table
        if stop < start:
            parser.error(f"--table STOP ({stop}) must not be less than START ({start}).")
        # Validate both ends before writing anything.
        try:
            word_ordinal(start)
            word_ordinal(stop)
        except OutOfRange as exc:
            parser.error(str(exc))
        count = write_table(table_rows(start, stop), args.output)
        if args.output is not None:
            print(f"Wrote {args.output} with {count} rows.")
        return

    parser.print_help()


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="English ordinal formatting utilities.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=int,
        help="Print the digit and word ordinals of an integer and the word length.",
    )
    group.add_argument(
        "--digits",
        type=int,
        help="Print the digit ordinal of an integer (e.g. 21st).",
    )
    group.add_argument(
        "--table",
        type=int,
        nargs=2,
        metavar=("START", "STOP"),
        help="Write a CSV of value, digit ordinal and word ordinal for START..STOP.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="CSV file to write --table to. Defaults to stdout.",
    )

    return parser


if __name__ == "__main__":
    main()
