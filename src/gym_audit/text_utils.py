"""Small text helpers shared by discovery and the evaluators."""

import re
from typing import Iterable, List, Optional

from gym_audit.constants import GYM_URL_PATTERN

_WHITESPACE = re.compile(r'\s+')

# Only the five predefined XML entities appear in sitemap <loc> values.
# &amp; goes last so an escaped entity decodes to its literal text.
_XML_ENTITIES = (
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
    ('&amp;', '&'),
)


def decode_entities(text: str) -> str:
    """Decode the XML entities used in sitemap location entries."""
    for entity, char in _XML_ENTITIES:
        text = text.replace(entity, char)
    return text


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(' ', text or '').strip()


def slug_from_gym_url(url: str) -> Optional[str]:
    """Return the club slug of a /gyms/{slug} URL, or None for any other URL."""
    match = GYM_URL_PATTERN.match(url)
    return match.group(1) if match else None


def titleize_slug(slug: str) -> str:
    """'cannon-street' -> 'Cannon Street'."""
    return ' '.join(word[:1].upper() + word[1:] for word in slug.split('-'))


def unique(items: Iterable[str]) -> List[str]:
    """Deduplicate, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))
