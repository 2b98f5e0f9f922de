"""BCP 47 subset language tags.

Supported forms:

    "zh"                [language]
    "zh-HK"             [language + region]
    "zh-123"            [language + region]
    "zh-Hant"           [language + script]
    "zh-Hant-HK"        [language + script + region]
    "zh-Hant-HK-x-AAAA" [language + script + region + private use]
"""

import re
import threading
from enum import IntEnum
from typing import Dict, Iterable, List, Optional

from infrastructure.i18n.exceptions import InvalidLanguageTagError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_TAG_REGEX = re.compile(
    r"^([a-zA-Z]{2,3})(?:-([a-zA-Z]{4,5}))?(?:-([a-zA-Z]{2}|[0-9]{3}))?(?:\-x-([a-zA-Z0-9]{4,}))?$"
)

NORMALIZED_LANGUAGE_TAGS = {
    "zh-cn": "zh-Hans",
    "zh-tw": "zh-Hant",
}


class MatchGrade(IntEnum):
    """How loosely two tags may match.

    Values:
        EXACT: All subtags equal (zh-Hans-HK / zh-Hans-HK)
        DEFAULT_REGION: Region may be absent on one side (zh-Hans-HK / zh-Hans)
        SCRIPT: Region may differ (zh-Hant-HK / zh-Hant-TW)
        LANGUAGE: Only the language must match (zh-Hans-HK / zh)
    """

    EXACT = 0
    DEFAULT_REGION = 1
    SCRIPT = 2
    LANGUAGE = 3


class LanguageTag:
    """A parsed language tag.

    Args:
        tag: Tag string. ``zh-CN`` and ``zh-TW`` are normalized to
            ``zh-Hans`` and ``zh-Hant``.

    Raises:
        InvalidLanguageTagError: If ``tag`` is not a supported language tag.
    """

    __slots__ = ("tag", "language", "script", "region", "private_use")

    def __init__(self, tag: str):
        if tag is None:
            raise ValueError("tag is required")
        normalized = NORMALIZED_LANGUAGE_TAGS.get(tag.strip().lower(), tag.strip())
        match = LANGUAGE_TAG_REGEX.match(normalized)
        if match is None:
            raise InvalidLanguageTagError(tag)

        self.tag = normalized
        self.language = match.group(1)
        self.script = match.group(2) or ""
        self.region = match.group(3) or ""
        self.private_use = match.group(4) or ""

    @staticmethod
    def is_valid(tag: Optional[str]) -> bool:
        if not tag:
            return False
        normalized = NORMALIZED_LANGUAGE_TAGS.get(tag.strip().lower(), tag.strip())
        return LANGUAGE_TAG_REGEX.match(normalized) is not None

    @property
    def global_key(self) -> str:
        return f"po:{self.tag}".lower()

    @property
    def parent_tag(self) -> Optional[str]:
        """Tag string of the next less specific tag.

        l-s-r-p -> l-s-r, l-s-r -> l-s, l-r -> l, l-s -> l, l -> None
        """
        if self.region and self.script and self.private_use:
            return f"{self.language}-{self.script}-{self.region}"
        if self.region and self.script:
            return f"{self.language}-{self.script}"
        if self.script or self.region:
            return self.language
        return None

    @property
    def parent(self) -> Optional["LanguageTag"]:
        parent_tag = self.parent_tag
        return LanguageTag(parent_tag) if parent_tag else None

    def parents(self) -> List["LanguageTag"]:
        """Return this tag followed by its ancestors, most specific first."""
        chain: List[LanguageTag] = [self]
        while chain[-1].parent is not None:
            chain.append(chain[-1].parent)
        return chain

    def match(self, other: "LanguageTag", grade: MatchGrade = MatchGrade.LANGUAGE) -> int:
        """Score how well ``other`` matches this tag.

        Language and private use subtags together count as the language.

        Returns:
            100 exact match, 99 region set on one side only, 98 regions
            differ, 97 script set on one side only, 96 scripts differ,
            0 language mismatch or a score below the requested grade.
        """
        if other is None:
            raise ValueError("other is required")

        def _same(a: str, b: str) -> bool:
            return a.lower() == b.lower()

        same_language = _same(self.language, other.language) and _same(
            self.private_use, other.private_use
        )
        if not same_language:
            return 0

        same_script = _same(self.script, other.script)
        same_region = _same(self.region, other.region)
        if same_script and same_region:
            return 100
        if grade == MatchGrade.EXACT:
            return 0

        if same_script and bool(self.region) != bool(other.region):
            return 99
        if grade == MatchGrade.DEFAULT_REGION:
            return 0

        if same_script:
            return 98
        if grade == MatchGrade.SCRIPT:
            return 0

        if bool(self.script) != bool(other.script):
            return 97
        return 96

    def match_any(
        self, others: Iterable["LanguageTag"], grade: MatchGrade = MatchGrade.LANGUAGE
    ) -> int:
        """Return the best score of this tag against ``others``."""
        best = 0
        for other in others:
            best = max(best, self.match(other, grade))
            if best == 100:
                break
        return best

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LanguageTag):
            return self.tag.lower() == other.tag.lower()
        if isinstance(other, str):
            return self.tag.lower() == other.lower()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.tag.lower())

    def __str__(self) -> str:
        return self.tag

    def __repr__(self) -> str:
        return f"LanguageTag({self.tag!r})"


class LanguageTagCache:
    """Process-scoped cache of parsed language tags keyed by raw string.

    The cache clears itself once it holds more than ``max_size`` entries,
    so tags taken from untrusted input cannot grow it without bound.
    Invalid tags are never cached.

    Args:
        max_size: Entry count above which the cache is cleared.
    """

    def __init__(self, max_size: int = 10000):
        self.max_size = max_size
        self._tags: Dict[str, LanguageTag] = {}
        self._lock = threading.Lock()

    def get(self, tag: Optional[str]) -> Optional[LanguageTag]:
        """Return the cached tag for ``tag``, parsing it on first use.

        Returns:
            LanguageTag, or None if ``tag`` is empty or invalid.
        """
        if not tag:
            return None
        with self._lock:
            cached = self._tags.get(tag)
        if cached is not None:
            return cached

        try:
            language_tag = LanguageTag(tag)
        except InvalidLanguageTagError:
            return None

        with self._lock:
            if len(self._tags) >= self.max_size:
                logger.warning("language_tag_cache_cleared", size=len(self._tags))
                self._tags.clear()
            return self._tags.setdefault(tag, language_tag)

    def clear(self) -> None:
        with self._lock:
            self._tags.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tags)
