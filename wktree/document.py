import logging

from wktree import DEFAULT_INDENT, WKTError
from wktree.parser import parse


logger = logging.getLogger(__name__)


class Document:
    """A parsed WKT definition.

    The document keeps the original text verbatim alongside the parsed
    tree. Queries and edits go through paths (see :meth:`find`) and the
    tree can be written back out at any time with :meth:`to_string`::

        doc = Document.parse(wkt)
        doc.set_value('SPHEROID', 'ITRF_2008')
        doc.set_number('SPHEROID', 0, 6378140.0)
        print(doc.to_string(pretty=True))

    Edits modify the tree in place. ``source`` is not updated.
    """
    def __init__(self, source='', root=None):
        self.source = source
        self.root = root

    @classmethod
    def parse(cls, text):
        """Parse ``text`` into a document.

        Lexer and parser errors are raised to the caller.
        """
        root = parse(text)
        logger.debug('Parsed %s definition (%d characters)', root.name,
                     len(text))
        return cls(text, root)

    @classmethod
    def try_parse(cls, text, errors=None):
        """Parse ``text``, returning ``None`` instead of raising.

        :param text: WKT text
        :param errors: optional list; the failure message is appended to
            it when parsing fails
        """
        try:
            return cls.parse(text)
        except WKTError as e:
            logger.debug('Failed to parse WKT: %s', e)
            if errors is not None:
                errors.append(str(e))
            return None

    def is_valid(self):
        return self.root is not None

    def find(self, path):
        """Return the node at ``path``, or ``None``.

        A path may start with the name of the root node
        (``GEOGCS/DATUM``), in which case the rest is resolved from the
        root. Otherwise the whole path is resolved by the root's
        :meth:`wktree.node.Node.find_by_path`, so a bare name like
        ``SPHEROID`` is found anywhere in the tree.
        """
        if self.root is None:
            return None
        first, sep, rest = path.partition('/')
        if first == self.root.name:
            return self.root.find_by_path(rest) if sep else self.root
        return self.root.find_by_path(path)

    def set_value(self, path, value):
        node = self.find(path)
        if node is None:
            return False
        return node.set_string_value('', value)

    def set_number(self, path, index, value):
        node = self.find(path)
        if node is None:
            return False
        return node.set_number(index, value)

    def set_numbers(self, path, values):
        """Replace all numbers of the node at ``path``.

        ``values`` must have exactly as many items as the node already has;
        otherwise nothing is changed and ``False`` is returned.
        """
        node = self.find(path)
        if node is None or len(node.numbers) != len(values):
            return False
        for i, value in enumerate(values):
            node.set_number(i, value)
        return True

    def to_string(self, pretty=False, indent=DEFAULT_INDENT):
        if self.root is None:
            return ''
        return self.root.to_string(indent if pretty else None)

    def get_projection_name(self):
        return self._string_value('PROJECTION')

    def get_datum_name(self):
        return self._string_value('DATUM')

    def get_spheroid_name(self):
        return self._string_value('SPHEROID')

    def get_spheroid_params(self):
        """Semi-major axis and inverse flattening of the spheroid.

        Returns ``None`` if there is no ``SPHEROID`` or it has fewer than
        two numbers.
        """
        spheroid = self.find('SPHEROID')
        if spheroid is None or len(spheroid.numbers) < 2:
            return None
        return spheroid.numbers[0], spheroid.numbers[1]

    def _string_value(self, name):
        node = self.find(name)
        if node is None:
            return None
        return node.string_value

    def __str__(self):
        return self.to_string()
