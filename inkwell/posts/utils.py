import math
import re
import unicodedata
from typing import Iterable, List, Optional

from inkwell.posts.constants import MAX_SLUG_LENGTH, MIN_READING_TIME, WORDS_PER_MINUTE

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """
    Generate URL-friendly slug from title.

    Accents are folded to ASCII, everything else that is not a letter or digit
    collapses into a single hyphen. Same title, same slug: no uniqueness suffix.
    Folding can expand a character, so the result is cut to the column width.
    """
    normalized = unicodedata.normalize("NFKD", title)
    ascii_title = normalized.encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM_RE.sub("-", ascii_title.lower()).strip("-")
    return slug[:MAX_SLUG_LENGTH].rstrip("-")


def calculate_reading_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """
    Estimated reading time in whole minutes, rounded up, never below 1
    """
    word_count = len(content.split())
    return max(MIN_READING_TIME, math.ceil(word_count / words_per_minute))


def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """
    Strip tags and drop blanks and repeats, keeping first-seen order
    """
    seen = set()
    result = []
    for tag in tags or []:
        cleaned = re.sub(r"\s+", " ", tag.strip())
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result


def can_mutate(acting_user_id: Optional[int], post) -> bool:
    """Only the author may update or delete a post."""
    return acting_user_id is not None and acting_user_id == post.author_id
