"""Link extraction: turns HTML text into the list of anchor ``href`` values."""

from __future__ import annotations

from typing import Iterator, List

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag


def parse_html(source: str) -> BeautifulSoup:
    """Parse *source* into a document tree.

    Uses the ``html5lib`` tree builder, which implements the WHATWG parsing
    algorithm: malformed markup is repaired, never rejected.
    """
    return BeautifulSoup(source, "html5lib")


def iter_elements(root: PageElement) -> Iterator[Tag]:
    """Yield every element under *root* depth-first, in document order.

    Text, comments and other non-element nodes are skipped.  The walk uses an
    explicit stack so very deep documents cannot hit the recursion limit.
    """
    stack: List[PageElement] = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Tag):
            continue
        # The BeautifulSoup object itself is the document root, not an element.
        if not isinstance(node, BeautifulSoup):
            yield node
        stack.extend(reversed(list(node.children)))


def extract_links(html_source: str) -> List[str]:
    """Return the ``href`` of every ``<a>`` element in *html_source*.

    Values are returned exactly as written, in document order, duplicates
    included.  Relative or otherwise odd hrefs are not resolved or validated;
    that is the caller's job.
    """
    document = parse_html(html_source)
    links: List[str] = []
    for element in iter_elements(document):
        if element.name.lower() != "a":
            continue
        for name, value in element.attrs.items():
            # Namespaced keys such as ``xlink:href`` carry their local name.
            local_name = getattr(name, "name", None) or name
            if local_name.lower() == "href":
                links.append(value)
    return links
