"""Source tree scanning for nuggets."""

import os
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterator, List, Optional, Tuple

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.i18n.models import (
    DISABLED_REFERENCES_PATH,
    Nugget,
    ReferenceContext,
    TemplateItem,
    key_from_msgid_and_comment,
    normalize_msgid,
)
from infrastructure.i18n.nuggets import NuggetContext, NuggetParser, NuggetTokens
from infrastructure.logging import get_module_logger

logger = get_module_logger()

MAX_PATH_LENGTH = 260

_FoundNugget = Tuple[Nugget, ReferenceContext, str]


class NuggetFinder:
    """Walks the configured directories and collects nuggets into a template.

    Args:
        settings: Localization settings (scan roots, white/black lists, tokens).
    """

    def __init__(self, settings: I18nSettings):
        if settings is None:
            raise ValueError("settings is required")
        self.settings = settings
        self.parser = NuggetParser(NuggetTokens.from_settings(settings), NuggetContext.SOURCE)
        self._lock = threading.Lock()

    def parse_all(self) -> Dict[str, TemplateItem]:
        """Scan every whitelisted file and return the template keyed by MsgKey."""
        blacklist = self.settings.blacklist
        whitelist = self.settings.whitelist
        files = [
            path
            for directory in self.settings.scan_directories
            for path in self.iter_files(directory, blacklist)
            if self._is_scannable(path, blacklist, whitelist)
        ]
        logger.info("nugget_scan_started", file_count=len(files))

        template_items: Dict[str, TemplateItem] = {}
        workers = max(1, self.settings.scan_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for found in executor.map(self.parse_file, files):
                for nugget, reference, file_name in found:
                    self.add_or_update(template_items, nugget, reference, file_name)

        logger.info("nugget_scan_finished", file_count=len(files), item_count=len(template_items))
        return template_items

    @staticmethod
    def iter_files(root: str, blacklist: Optional[List[str]] = None) -> Iterator[str]:
        """Yield files below ``root`` breadth first, skipping blacklisted paths."""
        blacklist = blacklist or []
        queue = deque([root])
        while queue:
            directory = queue.popleft()
            try:
                with os.scandir(directory) as listing:
                    entries = sorted(listing, key=lambda e: e.name)
            except OSError as e:
                logger.warning("scan_directory_failed", directory=directory, error=str(e))
                continue

            files = []
            for entry in entries:
                if _is_blacklisted(entry.path, blacklist):
                    continue
                if entry.is_dir(follow_symlinks=False):
                    queue.append(entry.path)
                elif entry.is_file():
                    files.append(entry.path)
            yield from files

    def parse_file(self, file_path: str) -> List[_FoundNugget]:
        """Parse one file and return its nuggets with their references."""
        reference_path = self.reference_path(file_path)
        file_name = template_file_name(file_path)
        with open(file_path, "r", encoding="utf-8-sig", errors="replace") as f:
            content = f.read()

        found: List[_FoundNugget] = []
        for _, position, nugget in self.parser.parse_all(content):
            if nugget is None:
                continue
            if self.settings.disable_references:
                reference = ReferenceContext.create(DISABLED_REFERENCES_PATH, content, 0)
            else:
                reference = ReferenceContext.create(reference_path, content, position)
            found.append((nugget, reference, file_name))

        logger.debug("nugget_file_parsed", path=reference_path, nugget_count=len(found))
        return found

    def add_or_update(
        self,
        template_items: Dict[str, TemplateItem],
        nugget: Nugget,
        reference: ReferenceContext,
        file_name: str,
    ) -> TemplateItem:
        """Insert a template item for ``nugget`` or merge into the existing one.

        A merge appends the reference (unless references are disabled)
        and the nugget comment when it is not already recorded.
        """
        msgid = normalize_msgid(nugget.msgid)
        key = key_from_msgid_and_comment(
            msgid, nugget.comment, self.settings.message_context_enabled_from_comment
        )
        with self._lock:
            item = template_items.get(key)
            if item is None:
                item = TemplateItem(
                    msgkey=key,
                    msgid=msgid,
                    file_name=file_name,
                    references=[reference],
                    comments=[nugget.comment] if nugget.comment else [],
                )
                template_items[key] = item
                return item

            if not self.settings.disable_references:
                item.references.append(reference)
            if nugget.comment and nugget.comment not in item.comments:
                item.comments.append(nugget.comment)
            return item

    def reference_path(self, file_path: str) -> str:
        relative = os.path.relpath(os.path.abspath(file_path), self.settings.project_root)
        return relative.replace(os.sep, "/")

    @staticmethod
    def _is_scannable(path: str, blacklist: List[str], whitelist: List[str]) -> bool:
        if len(path) >= MAX_PATH_LENGTH:
            logger.warning("path_too_long", path=path)
            return False
        if _is_blacklisted(os.path.dirname(os.path.abspath(path)), blacklist):
            return False
        return matches_whitelist(os.path.basename(path), whitelist)


def matches_whitelist(file_name: str, whitelist: List[str]) -> bool:
    """Check a file name against ``*.ext`` suffix entries and exact names."""
    for entry in whitelist:
        if entry.startswith("*."):
            if file_name.lower().endswith(entry[1:].lower()):
                return True
        elif file_name == entry:
            return True
    return False


def template_file_name(file_path: str) -> str:
    """Source file name up to its first dot (``view.html.py`` -> ``view``)."""
    return os.path.basename(file_path).split(".", 1)[0]


def _is_blacklisted(path: str, blacklist: List[str]) -> bool:
    lowered = path.lower()
    return any(lowered.startswith(entry.lower()) for entry in blacklist)
