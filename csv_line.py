"""
Quote-aware splitting of a single delimited line.

Unlike the csv module this keeps the quote characters in the returned
fields and never fails on unbalanced quotes, so a row can be inspected
exactly as it appears in the file.
"""

QUOTE = '"'


def parse_csv_line(line: str, delimiter: str = ",") -> list[str]:
    """Split *line* on *delimiter*, ignoring delimiters inside double quotes.

    A delimiter is literal text while an odd number of quote characters has
    been seen so far on the line. Quotes are kept in the output.

    Example::

        'A,"B,C",D'  ->  ['A', '"B,C"', 'D']

    Args:
        line:      One raw line; a trailing newline is dropped.
        delimiter: Single separator character.

    Returns:
        list[str]: One entry per field, empty fields included.
    """
    line = line.rstrip("\r\n")

    fields: list[str] = []
    start = 0
    in_quotes = False
    for i, char in enumerate(line):
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append(line[start:i])
            start = i + 1

    fields.append(line[start:])
    return fields
