import math

import attr


_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63


def format_number(value):
    """Render a number the way it is written back into WKT.

    Whole numbers are written without a decimal point or exponent, so
    ``6378137.0`` becomes ``6378137``. Anything else is written with up to
    15 significant digits, unless rounding to 15 digits would push a value
    near the largest double out of range.
    """
    value = float(value)
    if value.is_integer() and _INT64_MIN <= value < _INT64_MAX:
        return str(int(value))
    text = '{:.15g}'.format(value)
    if math.isinf(float(text)) and not math.isinf(value):
        return repr(value)
    return text


@attr.s(eq=False)
class Node:
    """A single ``NAME[...]`` section of a WKT definition.

    A node has a name, at most one string value, an ordered list of numbers
    and an ordered list of child nodes. Children belong to exactly one
    parent; the parser only ever appends to a node, so a tree is always
    acyclic. Nodes compare by identity; use
    :func:`wktree.utils.nodes_equivalent` for structural comparison.

    ``source_start`` and ``source_end`` record the half-open range of the
    source text the node was parsed from. They are not updated when the
    node is modified.
    """
    name = attr.ib()
    string_value = attr.ib(default=None)
    numbers = attr.ib(factory=list)
    children = attr.ib(factory=list)
    source_start = attr.ib(default=0)
    source_end = attr.ib(default=0)

    @property
    def source_range(self):
        return self.source_start, self.source_end

    def add_number(self, value):
        self.numbers.append(value)

    def add_child(self, child):
        self.children.append(child)

    def find_child(self, name):
        """Return the first direct child called ``name``, or ``None``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_all_children(self, name):
        """Return all direct children called ``name``, in order."""
        return [child for child in self.children if child.name == name]

    def find_by_path(self, path):
        """Resolve a ``/`` separated path such as ``DATUM/SPHEROID``.

        The first segment is matched against the direct children. When a
        child matches, the rest of the path is resolved from that child
        (and the first matching child is the only one tried). When no child
        matches, every child subtree is searched in order for the whole
        path, and the first hit is returned. This makes a single segment
        such as ``SPHEROID`` a deep search, while a multi-segment path that
        does not match exactly will usually find nothing.

        An empty path resolves to the node itself.
        """
        if not path:
            return self
        first, _, rest = path.partition('/')
        for child in self.children:
            if child.name == first:
                return child.find_by_path(rest) if rest else child
        for child in self.children:
            found = child.find_by_path(path)
            if found is not None:
                return found
        return None

    def set_string_value(self, path, value):
        node = self.find_by_path(path)
        if node is None:
            return False
        node.string_value = value
        return True

    def set_number(self, index, value):
        """Replace the number at ``index``.

        Returns ``False`` if ``index`` is outside the current list of
        numbers; the list is never grown.
        """
        if not 0 <= index < len(self.numbers):
            return False
        self.numbers[index] = value
        return True

    def set_number_by_path(self, path, index, value):
        node = self.find_by_path(path)
        if node is None:
            return False
        return node.set_number(index, value)

    def visit(self, visitor):
        """Call ``visitor`` on this node and every descendant, pre-order."""
        visitor(self)
        for child in self.children:
            child.visit(visitor)

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()

    def to_string(self, indent=None):
        """Serialize the subtree.

        With ``indent`` left as ``None`` the output is compact. Otherwise
        every child starts on a new line indented by ``indent`` spaces per
        level, and the closing bracket of a node with children goes on its
        own line.
        """
        out = []
        self._write(out, indent, 0)
        return ''.join(out)

    def _write(self, out, indent, depth):
        values = []
        if self.string_value is not None:
            values.append('"{}"'.format(self.string_value))
        values.extend(format_number(n) for n in self.numbers)
        out.append('{}[{}'.format(self.name, ','.join(values)))
        for i, child in enumerate(self.children):
            if values or i:
                out.append(',')
            if indent is not None:
                out.append('\n' + ' ' * (indent * (depth + 1)))
            child._write(out, indent, depth + 1)
        if indent is not None and self.children:
            out.append('\n' + ' ' * (indent * depth))
        out.append(']')

    def __str__(self):
        return self.to_string()
