import re
from .results import CheckResult

HEADING_RE = re.compile(r'^(#{1,6})([ \t]+)(\S.*)$', re.MULTILINE)
# Links must not be images: "![alt](src)" is handled by check_image_alt
LINK_RE = re.compile(r'(?<!!)\[([^\]]*)\]\(([^)]+)\)')
IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')


def _heading_level(hashes: str, separator: str) -> int:
    return len(hashes) if separator.startswith(" ") else 0


def check_headings(text: str, subheading_penalty: float = 0.7) -> CheckResult:
    # Level counts only when a space follows the hashes, so "#\tTitle" is a heading but not an H1
    headings = [(_heading_level(hashes, sep), title.strip()) for hashes, sep, title in HEADING_RE.findall(text)]
    if not headings:
        return CheckResult(0.0, ("No headings found. Use headings to structure your content.",), {"headingsCount": 0})

    h1_count = sum(1 for level, _ in headings if level == 1)
    has_subheadings = any(level == 2 for level, _ in headings)
    details = {
        "headingsCount": len(headings),
        "h1Count": h1_count,
        "h2Count": sum(1 for level, _ in headings if level == 2),
    }

    suggestions = []
    score = 1.0
    if h1_count == 0:
        suggestions.append("Add a main heading (H1) to your content.")
        score = 0.3
    elif h1_count > 1:
        suggestions.append("Multiple H1 headings found. Use only one main heading.")
        score = 0.5

    if not has_subheadings:
        suggestions.append("Add subheadings (H2, H3) to better structure your content.")
        score = score * subheading_penalty

    return CheckResult(score, tuple(suggestions), details)


def check_links(text: str) -> CheckResult:
    links = LINK_RE.findall(text)
    details = {"linksCount": len(links)}
    if not links:
        return CheckResult(0.5, ("No links found. Add relevant internal or external links to enhance content value.",), details)

    empty_anchors = sum(1 for anchor, _ in links if not anchor.strip())
    details["emptyAnchorCount"] = empty_anchors
    if empty_anchors:
        return CheckResult(0.7, ("Some links have empty anchor text. Add descriptive text to all links.",), details)
    return CheckResult(1.0, (), details)


def check_image_alt(text: str) -> CheckResult:
    images = IMAGE_RE.findall(text)
    missing_alt = sum(1 for alt, _ in images if not alt.strip())
    details = {"imagesCount": len(images), "missingAltCount": missing_alt}
    # Absence of images is not penalized
    if missing_alt:
        return CheckResult(0.5, ("Some images are missing alt text. Add descriptive alt text to all images.",), details)
    return CheckResult(1.0, (), details)
