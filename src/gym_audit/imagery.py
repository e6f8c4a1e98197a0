"""Imagery criterion: enough club photography, served efficiently."""

from dataclasses import dataclass
from typing import List, Optional

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.constants import IGNORED_IMAGE_PATTERN, MODERN_FORMAT_MARKERS
from gym_audit.models import Criterion
from gym_audit.page_parser import ImageElement, ParsedPage


@dataclass(frozen=True)
class ImageryCounts:
    meaningful: int
    modern_format: int
    lazy: int


class ImageryEvaluator:
    """Scores the page's non-decorative images.

    Logos, icons, sprites, favicons, social badges and avatars are excluded by
    substring match against src, srcset, alt and class. Of the remaining
    images only those with a src or srcset count as meaningful.
    """

    name = "imagery"

    def __init__(self, thresholds: Optional[AuditThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    @staticmethod
    def is_meaningful(img: ImageElement) -> bool:
        hay = f"{img.src} {img.srcset} {img.alt} {img.cls}".lower()
        if IGNORED_IMAGE_PATTERN.search(hay):
            return False
        return bool(img.src or img.srcset)

    @staticmethod
    def is_modern_format(img: ImageElement) -> bool:
        hay = f"{img.src} {img.srcset}".lower()
        return any(marker in hay for marker in MODERN_FORMAT_MARKERS)

    def count(self, images: List[ImageElement]) -> ImageryCounts:
        meaningful = [img for img in images if self.is_meaningful(img)]
        return ImageryCounts(
            meaningful=len(meaningful),
            modern_format=sum(1 for img in meaningful if self.is_modern_format(img)),
            lazy=sum(1 for img in meaningful if img.loading.lower() == 'lazy'),
        )

    def passes(self, counts: ImageryCounts) -> bool:
        t = self.thresholds
        return counts.meaningful >= t.min_meaningful_images and (
            counts.modern_format >= t.min_modern_images or counts.lazy >= t.min_lazy_images
        )

    def evaluate(self, page: ParsedPage) -> Criterion:
        counts = self.count(page.images)
        passed = self.passes(counts)
        return Criterion(passed, self.build_evidence(counts, passed))

    def build_evidence(self, counts: ImageryCounts, passed: bool) -> str:
        t = self.thresholds
        lazy_status = 'Good' if counts.lazy >= t.min_lazy_images else 'Needs work'
        modern_status = 'Good' if counts.modern_format >= t.min_modern_images else 'Needs work'
        metrics = (
            f"Relevant images: {counts.meaningful} (target {t.min_meaningful_images}+). "
            f"Lazy-load: {lazy_status} ({counts.lazy} of {t.min_lazy_images} target). "
            f"Modern format: {modern_status} ({counts.modern_format} of {t.min_modern_images} target)."
        )

        if passed:
            return f"Imagery looks strong. {metrics}"

        improvements = []
        if counts.meaningful < t.min_meaningful_images:
            improvements.append(
                f"add more high-quality club imagery "
                f"(currently {counts.meaningful}, target at least {t.min_meaningful_images})"
            )
        if counts.modern_format < t.min_modern_images:
            improvements.append("serve hero/gallery images in WebP or AVIF")
        if counts.lazy < t.min_lazy_images:
            improvements.append(
                f"enable lazy-loading on more non-critical images "
                f"(currently {counts.lazy}, target at least {t.min_lazy_images})"
            )

        return f"Imagery needs improvement. {metrics} Recommended actions: {'; '.join(improvements)}."
