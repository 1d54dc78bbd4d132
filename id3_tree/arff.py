# id3_tree/arff.py
"""
Reader for nominal ARFF files.

Only the parts of the format needed for nominal data are understood:
`@relation`, `@attribute name {v1, v2, ...}` and the `@data` section.
"""
import os

from .dataset import Attribute, Dataset


class ArffFormatError(ValueError):
    """Raised when an ARFF file cannot be interpreted."""


def _unquote(token):
    token = token.strip()
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ("'", '"'):
        return token[1:-1]
    return token


def split_values(text, delimiter=","):
    """Splits on `delimiter` and trims (and unquotes) each piece."""
    return [_unquote(piece) for piece in text.split(delimiter)]


def parse_attribute_line(line):
    """
    Parses `@attribute name {a, b, c}` into an Attribute.
    Lines without a brace-delimited domain yield an attribute with an empty domain.
    """
    parts = line.split(None, 1)
    body = parts[1] if len(parts) > 1 else ""
    brace_start = body.find('{')
    brace_end = body.rfind('}')

    if brace_start != -1:
        name = _unquote(body[:brace_start])
        if brace_end == -1 or brace_end < brace_start:
            raise ArffFormatError(f"Unterminated domain in attribute line: {line}")
        domain = split_values(body[brace_start + 1:brace_end])
    else:
        parts = body.split()
        if not parts:
            raise ArffFormatError(f"Attribute line without a name: {line}")
        name = _unquote(parts[0])
        domain = []
    return Attribute(name, domain)


def parse_arff(lines, strict=False):
    """
    Parses ARFF text lines into a Dataset.

    Args:
        lines (iterable of str): File content, one line per item.
        strict (bool): Raise MalformedRowError on rows of the wrong length instead of warning.

    Returns:
        Dataset
    """
    attributes = []
    relation = None
    data_lines = []
    data_section = False

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith('%'):
            continue

        keyword = line.split(None, 1)[0].lower()
        if keyword == '@relation':
            parts = line.split(None, 1)
            relation = _unquote(parts[1]) if len(parts) > 1 else None
        elif keyword == '@attribute':
            attributes.append(parse_attribute_line(line))
        elif keyword == '@data':
            data_section = True
        elif data_section:
            data_lines.append(line)
        else:
            raise ArffFormatError(f"Unexpected line before @data: {line}")

    if data_lines and not attributes:
        raise ArffFormatError("Data rows found but no attributes were declared.")

    dataset = Dataset(attributes, relation=relation)
    for line in data_lines:
        dataset.add_row(split_values(line), strict=strict)
    return dataset


def read_arff(filename, strict=False):
    """
    Reads a nominal ARFF file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ArffFormatError: If the header cannot be interpreted.
    """
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"Error opening file: {filename}")
    with open(filename, 'r') as f:
        return parse_arff(f, strict=strict)
