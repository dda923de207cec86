"""Helpers for pulling visible text out of parsed status pages."""

from bs4.element import NavigableString, PageElement, PreformattedString, Tag


def get_text(node: PageElement) -> str:
    """Concatenate every text node under `node`, in document order, and trim the result.

    Unlike Tag.get_text() each nested element is trimmed on its own before being joined,
    so `<td><b> 37 </b> dB</td>` becomes '37 dB'.
    Whitespace inside a text node (including newlines) is left alone; some cells carry
    multi-line vendor text and the parsers decide what to do with it.
    """
    # Comments, doctypes, CDATA ... are not visible text
    if isinstance(node, PreformattedString):
        return ""
    if isinstance(node, NavigableString):
        return str(node).strip()
    if not isinstance(node, Tag):
        return ""

    text = []
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            text.append(str(child))
        else:
            text.append(get_text(child))
    return "".join(text).strip()
