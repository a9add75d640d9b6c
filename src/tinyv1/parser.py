# A parser to handle tiny v1 (.tiny) files, as used by Fabric's Intermediary and older Yarn releases
# The first line declares the namespaces, every following line is a tab separated class, field or method entry

import logging
from typing import Iterator, List, Tuple

from tinyv1.mappings import Header, ClassEntry, FieldEntry, MethodEntry, Record, Content, File

LOG = logging.getLogger(__name__)


def parse_file(text: str) -> File:
    """
    Parses an entire tiny v1 file.
    Everything up to the first line break is the header, everything after it is the content.
    """
    if '\n' not in text:
        raise TinyV1Error('No line break')

    header_line, content_text = text.split('\n', 1)
    header = parse_header(header_line)
    content = parse_content(content_text)

    LOG.debug('Parsed %s', content)
    return File(header, content)


def parse_header(line: str) -> Header:
    if line == '':
        raise TinyV1Error('Empty header')

    tokens = iter(line.split('\t'))
    if next(tokens) != 'v1':
        raise TinyV1Error('Wrong format')

    namespace_a = expect_token(tokens, 'Namespace a not found')
    namespace_b = expect_token(tokens, 'Namespace b not found')
    return Header(namespace_a, namespace_b, tuple(tokens))


def parse_content(text: str) -> Content:
    """ Parses every line as an entry. The first invalid line fails the entire content. """
    return Content(tuple(parse_record(line) for line in split_lines(text)))


def parse_record(line: str) -> Record:
    if line == '':
        raise TinyV1Error('Line can not be empty')

    tokens = iter(line.split('\t'))
    identifier = next(tokens)
    if identifier == 'CLASS':
        return ClassEntry(tuple(tokens))
    elif identifier == 'FIELD':
        return FieldEntry(*parse_member(tokens, 'Field'))
    elif identifier == 'METHOD':
        return MethodEntry(*parse_member(tokens, 'Method'))
    else:
        raise TinyV1Error('Invalid identifier')


def parse_member(tokens: Iterator[str], member: str) -> Tuple[str, str, str, str, Tuple[str, ...]]:
    # Fields and methods share a layout: owner, descriptor and name in namespace a, then the mapped names
    parent_class = expect_token(tokens, 'Parent class not found')
    desc = expect_token(tokens, '%s descriptor not found' % member)
    name_a = expect_token(tokens, '%s name a not found' % member)
    name_b = expect_token(tokens, '%s name b not found' % member)
    return parent_class, desc, name_a, name_b, tuple(tokens)


# Internal / Utility

def expect_token(tokens: Iterator[str], error: str) -> str:
    token = next(tokens, None)
    if token is None:
        raise TinyV1Error(error)
    return token


def split_lines(text: str) -> List[str]:
    """ Splits on line breaks. A trailing line break does not start another (empty) line. """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [strip_carriage_return(line) for line in lines]


def strip_carriage_return(line: str) -> str:
    return line[:-1] if line.endswith('\r') else line


class TinyV1Error(ValueError):
    """
    Raised for the first structural problem found in a tiny v1 file.
    Only carries a message: there is no line or column information.
    """

    def __init__(self, message: str):
        self.message = message
        super(TinyV1Error, self).__init__(message)
