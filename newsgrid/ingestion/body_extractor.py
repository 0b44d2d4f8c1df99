"""Article body extraction from parsed article pages.

Story pages wrap their prose in a single container marked with
``name="articleBody"``. Everything outside it (navigation, captions,
related links, newsletter boxes) is noise, and inside it only text that sits
directly in a ``<p>`` is kept.

Interactive features usually have no such container; that is an expected
outcome and yields an empty string rather than an error.

Both traversals use an explicit stack since page markup is untrusted and may be
nested arbitrarily deep.
"""

from typing import Iterator, List, Optional, Union

from lxml import etree
from lxml import html as lxml_html

from ..errors import DocumentParseError

BODY_MARKER_ATTR = "name"
BODY_MARKER_VALUE = "articleBody"
PARAGRAPH_TAG = "p"


def parse_document(markup: Union[str, bytes], encoding: Optional[str] = None) -> etree._Element:
    """Parse an HTML page into an element tree.

    ``encoding`` applies to byte input only; without it libxml2 relies on the
    page's own charset declaration. ``huge_tree`` lifts libxml2's nesting
    limit, past which content is dropped without an error.

    Raises:
        DocumentParseError: If the markup cannot be parsed at all
    """
    try:
        if not isinstance(markup, bytes):
            encoding = None
        parser = lxml_html.HTMLParser(huge_tree=True, encoding=encoding)
        return lxml_html.document_fromstring(markup, parser=parser)
    except (etree.ParserError, LookupError, ValueError) as e:
        raise DocumentParseError(f"Unparseable document: {e}") from e


def _is_element(node: etree._Element) -> bool:
    # Comments and processing instructions have a callable tag
    return isinstance(node.tag, str)


def is_body_node(node: etree._Element) -> bool:
    """Whether the element is the article body container."""
    return _is_element(node) and node.get(BODY_MARKER_ATTR) == BODY_MARKER_VALUE


def find_body_node(root: etree._Element) -> Optional[etree._Element]:
    """Return the first body container in document order, or None."""
    stack: List[etree._Element] = [root]
    while stack:
        node = stack.pop()
        if is_body_node(node):
            return node
        stack.extend(child for child in reversed(node) if _is_element(child))
    return None


def iter_paragraph_text(node: etree._Element) -> Iterator[str]:
    """Yield, in document order, every text node whose parent is a paragraph.

    lxml keeps text in ``.text`` (belongs to the element) and ``.tail``
    (belongs to the element's parent), so a paragraph owns its ``.text`` plus
    the tails of its direct children.
    """
    stack: List[Union[str, etree._Element]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            yield item
            continue

        in_paragraph = item.tag == PARAGRAPH_TAG
        if in_paragraph and item.text:
            yield item.text

        for child in reversed(item):
            if in_paragraph and child.tail:
                stack.append(child.tail)
            if _is_element(child):
                stack.append(child)


def extract_body_text(root: etree._Element) -> str:
    """Extract paragraph text from the article body of a parsed page.

    Each text segment is followed by a newline. Returns an empty string when
    the page has no body container.
    """
    body = find_body_node(root)
    if body is None:
        return ""
    return "".join(f"{segment}\n" for segment in iter_paragraph_text(body))


def extract_text(markup: Union[str, bytes], encoding: Optional[str] = None) -> str:
    """Parse markup and extract its article body text.

    Raises:
        DocumentParseError: If the markup cannot be parsed
    """
    return extract_body_text(parse_document(markup, encoding))
