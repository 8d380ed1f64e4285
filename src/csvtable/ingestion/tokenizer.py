"""Line-oriented CSV tokenizer.

Handles quoted fields containing commas. It is deliberately not RFC 4180:
doubled quotes are not unescaped and quoted fields cannot span lines. Every
``"`` character is removed from the output.
"""

from csvtable.errors import MalformedInputError

DELIMITER = ","
QUOTE = '"'


def parse_header(line: str) -> list[str]:
    """Split the header line on commas. Quotes are stripped, not interpreted."""
    return [field.strip().replace(QUOTE, "") for field in line.split(DELIMITER)]


def split_line(line: str) -> list[str]:
    """Split one data line into fields, treating commas inside quotes as data."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())

    return [field.replace(QUOTE, "") for field in fields]


def parse_csv(text: str) -> tuple[list[str], list[list[str]]]:
    """Parse CSV text into its header and data rows.

    Rows are returned as parsed; arity is not checked against the header.

    Raises:
        MalformedInputError: The text is blank or has no data row.
    """
    stripped = text.strip()
    if not stripped:
        raise MalformedInputError("CSV file is empty")

    lines = [line.strip() for line in stripped.split("\n")]
    if len(lines) < 2:
        raise MalformedInputError("CSV must have at least a header row and one data row")

    header = parse_header(lines[0])
    rows = [split_line(line) for line in lines[1:]]
    return header, rows
