from wktree import DEFAULT_TOLERANCE
from wktree.document import Document


#: Geographic CRS codes by datum name. Projected systems also depend on the
#: projection and its parameters, so they cannot be guessed from the datum.
DATUM_EPSG = {
    'D_WGS_1984': 4326,
    'WGS_1984': 4326,
    'D_North_American_1983': 4269,
    'D_NAD83': 4269,
    'D_North_American_1927': 4267,
    'D_NAD27': 4267,
    'D_ETRS_1989': 4258,
    'D_Pulkovo_1942': 4284,
    'D_S_JTSK': 4156,
}


def guess_epsg(doc):
    """Guess the EPSG code of a geographic CRS from its datum name."""
    return DATUM_EPSG.get(doc.get_datum_name())


def validate_wkt(text, errors=None):
    """Return whether ``text`` parses.

    :param errors: optional list the failure message is appended to
    """
    return Document.try_parse(text, errors) is not None


def nodes_equivalent(a, b, tolerance=DEFAULT_TOLERANCE):
    """Structural comparison of two node trees.

    Names and string values must match exactly. Number lists must have the
    same length and each pair may differ by at most ``tolerance``. Children
    are compared pairwise in order, so reordered children are different.
    """
    if a is None or b is None:
        return a is b
    if a.name != b.name or a.string_value != b.string_value:
        return False
    if len(a.numbers) != len(b.numbers) or \
            len(a.children) != len(b.children):
        return False
    if any(abs(x - y) > tolerance for x, y in zip(a.numbers, b.numbers)):
        return False
    return all(nodes_equivalent(x, y, tolerance)
               for x, y in zip(a.children, b.children))


def are_equivalent(a, b, tolerance=DEFAULT_TOLERANCE):
    """Compare two documents with :func:`nodes_equivalent`."""
    return nodes_equivalent(a.root, b.root, tolerance)
