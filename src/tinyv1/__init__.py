# Tiny v1 mapping file parser

from tinyv1.mappings import Header, ClassEntry, FieldEntry, MethodEntry, Record, Content, File
from tinyv1.parser import TinyV1Error, parse_file


def parse(text: str) -> File:
    """ Parses a tiny v1 file from text. Raises a TinyV1Error on the first malformed line. """
    return parse_file(text)
