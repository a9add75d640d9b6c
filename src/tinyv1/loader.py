# Loads tiny files from disk
# Parsing is done separately, this only handles reading and normalizing text

from typing import Any

from tinyv1.mappings import File
from tinyv1.parser import parse_file


def load_tiny(file_path: str) -> File:
    return parse_file(load_text(file_path))


def load_text(file_path: str) -> str:
    try:
        with open(file_path, 'rb') as f:
            text = as_text(f.read())
        return text
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError('Loading %s' % repr(file_path)) from e


def as_text(raw: Any) -> str:
    if not isinstance(raw, str):
        raw = raw.decode('utf-8')
    return raw.replace('\r\n', '\n')


class LoadError(Exception):
    """ A file could not be read. The cause is chained. """
