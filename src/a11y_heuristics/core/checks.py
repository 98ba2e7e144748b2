"""Heuristic accessibility checks over raw markup text.

Every check is a pure function of a markup string: it never raises and
returns ``True`` when no offending occurrence is found (including when the
fragment contains no relevant element at all).

The checks search the text with regular expressions rather than building a
document tree, so they inherit the limits of that approach: multi-line
buttons and links are not matched, ``<abbr>`` matches the anchor pattern,
self-closing ``<button />`` tags are skipped, and only double-quoted ``id``
values are resolved against labels.
"""

import re
from typing import List

IMG_PATTERN = re.compile(r"<img[^>]*>")
INPUT_PATTERN = re.compile(r"<input[^>]*>")
HEADING_PATTERN = re.compile(r"<h([1-6])[^>]*>")
BUTTON_PATTERN = re.compile(r"<button[^>]*>.*?</button>")
LINK_PATTERN = re.compile(r"<a[^>]*>.*?</a>")

_ID_PATTERN = re.compile(r'id="([^"]*)"')
_TAG_PATTERN = re.compile(r"<[^>]*>")


def _has_accessible_name(occurrence: str) -> bool:
    text = _TAG_PATTERN.sub("", occurrence).strip()
    if text:
        return True
    return "aria-label=" in occurrence or "title=" in occurrence


def find_images_missing_alt(html: str) -> List[str]:
    """Return every ``<img>`` occurrence without an ``alt=`` attribute."""
    return [tag for tag in IMG_PATTERN.findall(html) if "alt=" not in tag]


def find_unlabeled_inputs(html: str) -> List[str]:
    """Return ``<input>`` occurrences whose ``id`` has no matching ``<label for>``.

    Inputs carrying ``aria-label`` or ``aria-labelledby`` are considered
    labelled. Inputs without an ``id`` are never reported.
    """
    unlabeled = []
    for tag in INPUT_PATTERN.findall(html):
        if "aria-label=" in tag or "aria-labelledby=" in tag:
            continue
        if "id=" not in tag:
            continue
        m = _ID_PATTERN.search(tag)
        if not m:
            continue
        label = re.compile(r'<label[^>]*for="%s"[^>]*>' % re.escape(m.group(1)))
        if not label.search(html):
            unlabeled.append(tag)
    return unlabeled


def find_skipped_headings(html: str) -> List[str]:
    """Return headings that go more than one level deeper than the previous one.

    The running level starts at 0 (no heading seen), and the first heading
    sets it without being compared, so a fragment may open at any level.
    Moving back up to any shallower level is always allowed.
    """
    skipped = []
    previous = 0
    for m in HEADING_PATTERN.finditer(html):
        level = int(m.group(1))
        if previous and level > previous + 1:
            skipped.append(m.group(0))
        previous = level
    return skipped


def find_unnamed_buttons(html: str) -> List[str]:
    """Return ``<button>...</button>`` occurrences with no text, aria-label or title."""
    return [b for b in BUTTON_PATTERN.findall(html) if not _has_accessible_name(b)]


def find_unnamed_links(html: str) -> List[str]:
    """Return ``<a>...</a>`` occurrences with no text, aria-label or title."""
    return [a for a in LINK_PATTERN.findall(html) if not _has_accessible_name(a)]


def check_alt_text(html: str) -> bool:
    return not find_images_missing_alt(html)


def check_form_labels(html: str) -> bool:
    return not find_unlabeled_inputs(html)


def check_heading_structure(html: str) -> bool:
    return not find_skipped_headings(html)


def check_button_names(html: str) -> bool:
    return not find_unnamed_buttons(html)


def check_link_text(html: str) -> bool:
    return not find_unnamed_links(html)
