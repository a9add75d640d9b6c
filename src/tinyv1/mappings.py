# The in-memory representation of a parsed tiny v1 file
# Everything here is immutable, and compares structurally

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union


@dataclass(frozen=True)
class Header:
    """
    The first line of a tiny v1 file.
    Two namespaces are mandatory, any number of extra namespaces may follow them.
    """

    namespace_a: str
    namespace_b: str
    namespaces: Tuple[str, ...]

    @property
    def all_namespaces(self) -> Tuple[str, ...]:
        return (self.namespace_a, self.namespace_b) + self.namespaces

    def __str__(self):
        return 'v1 %s' % ' -> '.join(self.all_namespaces)


@dataclass(frozen=True)
class ClassEntry:
    """ A class name in each namespace. Not checked against the number of namespaces in the header. """

    kind: ClassVar[str] = 'CLASS'

    class_names: Tuple[str, ...]

    def __str__(self):
        return 'class %s' % ' -> '.join(self.class_names)


@dataclass(frozen=True)
class FieldEntry:
    """
    A field, identified by its owning class and descriptor in namespace a.
    The extra names line up with the header's extra namespaces, by position.
    """

    kind: ClassVar[str] = 'FIELD'

    parent_class_name_a: str
    field_desc_a: str
    field_name_a: str
    field_name_b: str
    extra_ns_field_names: Tuple[str, ...]

    def __str__(self):
        return 'field %s.%s %s -> %s' % (self.parent_class_name_a, self.field_name_a, self.field_desc_a, ' -> '.join((self.field_name_b,) + self.extra_ns_field_names))


@dataclass(frozen=True)
class MethodEntry:
    """
    A method, identified by its owning class and descriptor in namespace a.
    The extra names line up with the header's extra namespaces, by position.
    """

    kind: ClassVar[str] = 'METHOD'

    parent_class_name_a: str
    method_desc_a: str
    method_name_a: str
    method_name_b: str
    extra_ns_method_names: Tuple[str, ...]

    def __str__(self):
        return 'method %s.%s %s -> %s' % (self.parent_class_name_a, self.method_name_a, self.method_desc_a, ' -> '.join((self.method_name_b,) + self.extra_ns_method_names))


# Exactly one of three shapes, told apart by `kind`
Record = Union[ClassEntry, FieldEntry, MethodEntry]


@dataclass(frozen=True)
class Content:
    """ Every line after the header, in file order. """

    mapping_entries: Tuple[Record, ...]

    def count_of(self, kind: str) -> int:
        return sum(1 for entry in self.mapping_entries if entry.kind == kind)

    def __str__(self):
        return 'Content {Classes=%d, Fields=%d, Methods=%d}' % (self.count_of('CLASS'), self.count_of('FIELD'), self.count_of('METHOD'))


@dataclass(frozen=True)
class File:
    header: Header
    content: Content

    def __str__(self):
        return 'File {Namespaces=%d, Classes=%d, Fields=%d, Methods=%d}' % (len(self.header.all_namespaces), self.content.count_of('CLASS'), self.content.count_of('FIELD'), self.content.count_of('METHOD'))
