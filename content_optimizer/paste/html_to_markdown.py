import re
from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

SKIPPED_TAGS = {"script", "style", "noscript", "head", "title"}
HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}


def _children_markdown(node: Tag) -> str:
    return ''.join(_node_markdown(child) for child in node.children)


def _list_markdown(list_tag: Tag, ordered: bool) -> str:
    items = []
    index = 0
    for child in list_tag.children:
        if isinstance(child, Tag) and child.name == "li":
            index += 1
            marker = f"{index}." if ordered else "-"
            items.append(f"{marker} {_children_markdown(child).strip()}\n")
        else:
            items.append(_node_markdown(child))
    return '\n' + ''.join(items)


def _node_markdown(node) -> str:
    if isinstance(node, (Comment, Doctype)):
        return ''
    if isinstance(node, NavigableString):
        return str(node)
    if not isinstance(node, Tag):
        return ''

    tag_name = node.name.lower() if node.name else ''
    if tag_name in SKIPPED_TAGS:
        return ''
    if tag_name == "ul":
        return _list_markdown(node, ordered=False)
    if tag_name == "ol":
        return _list_markdown(node, ordered=True)
    if tag_name == "br":
        return '\n'
    if tag_name == "img":
        return f"![{node.get('alt', '').strip()}]({node.get('src', '')})" if node.get('src') else ''

    content = _children_markdown(node)
    if tag_name == "p":
        return content + '\n\n'
    if tag_name in ("strong", "b"):
        return f"**{content}**" if content.strip() else content
    if tag_name in ("em", "i"):
        return f"*{content}*" if content.strip() else content
    if tag_name in HEADING_TAGS:
        return f"{'#' * HEADING_TAGS[tag_name]} {content.strip()}\n"
    if tag_name == "li":
        # Stray <li> outside a list
        return f"- {content.strip()}\n"
    if tag_name == "a":
        href = node.get("href")
        return f"[{content}]({href})" if href else content
    return content


def html_to_markdown(html: str) -> str:
    """
    Converts a pasted HTML fragment (or plain text) into markdown.

    Walks the parsed tree and keeps only the formatting the editor
    understands: paragraphs, emphasis, headings, lists, links, images and
    line breaks. Runs of blank lines collapse to a single blank line.
    """
    if not html or not html.strip():
        return ''
    soup = BeautifulSoup(html, 'html.parser')
    markdown = _children_markdown(soup)
    markdown = re.sub(r'\n{3,}', '\n\n', markdown)
    return markdown.strip()
