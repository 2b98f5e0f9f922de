"""Template build service.

Runs the build-time pipeline: scan the sources for nuggets, write the
template(s), then merge the template into every language.
"""

import time
from dataclasses import dataclass
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_nugget_finder, create_repository
from infrastructure.i18n.finder import NuggetFinder
from infrastructure.i18n.merger import TranslationMerger
from infrastructure.i18n.repository import PoTranslationRepository
from infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a template build.

    Attributes:
        item_count: Distinct strings found in the sources.
        template_written: Whether at least one template was written.
        languages_merged: Languages whose translation files were updated.
        elapsed_seconds: Wall time of the build.
    """

    item_count: int
    template_written: bool
    languages_merged: int
    elapsed_seconds: float


class TemplateBuildService:
    """Class-based facade over the finder, repository and merger.

    Usage:
        service = TemplateBuildService(get_settings())
        result = service.build()
    """

    def __init__(
        self,
        settings: Settings,
        finder: Optional[NuggetFinder] = None,
        repository: Optional[PoTranslationRepository] = None,
        merger: Optional[TranslationMerger] = None,
    ):
        if settings is None:
            raise ValueError("settings is required")
        self.settings = settings
        self.finder = finder or create_nugget_finder(settings)
        self.repository = repository or create_repository(settings)
        self.merger = merger or TranslationMerger(self.repository)

    def build(self) -> BuildResult:
        started = time.perf_counter()

        items = self.finder.parse_all()
        template_written = self.repository.save_template(items)

        languages_merged = 0
        if template_written:
            languages_merged = len(self.repository.get_available_languages())
            self.merger.merge_all_translations(items)

        result = BuildResult(
            item_count=len(items),
            template_written=template_written,
            languages_merged=languages_merged,
            elapsed_seconds=time.perf_counter() - started,
        )
        logger.info(
            "template_build_finished",
            item_count=result.item_count,
            template_written=result.template_written,
            languages_merged=result.languages_merged,
            elapsed_seconds=round(result.elapsed_seconds, 3),
        )
        return result
