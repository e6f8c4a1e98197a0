"""Tests for the imagery criterion."""

import pytest

from gym_audit.imagery import ImageryCounts, ImageryEvaluator
from gym_audit.page_parser import ImageElement, ParsedPage


class TestImageryEvaluator:
    """Test suite for ImageryEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return ImageryEvaluator()

    def test_ignores_decorative_images(self, evaluator):
        assert not evaluator.is_meaningful(ImageElement(src="/assets/logo.svg"))
        assert not evaluator.is_meaningful(ImageElement(src="/a.png", cls="social-share"))
        assert not evaluator.is_meaningful(ImageElement(src="/a.png", alt="Member avatar"))
        assert not evaluator.is_meaningful(ImageElement(srcset="/sprite.png 2x"))
        assert not evaluator.is_meaningful(ImageElement(alt="No source"))
        assert evaluator.is_meaningful(ImageElement(srcset="/pool.jpg 1x"))

    def test_modern_format_markers(self, evaluator):
        assert evaluator.is_modern_format(ImageElement(src="/a.webp"))
        assert evaluator.is_modern_format(ImageElement(src="/a.AVIF"))
        assert evaluator.is_modern_format(ImageElement(src="/a?format=webp"))
        assert evaluator.is_modern_format(ImageElement(src="https://cdn/x/f_auto/a.jpg"))
        assert not evaluator.is_modern_format(ImageElement(src="/a.jpg"))

    @pytest.mark.parametrize("modern,lazy", [(0, 0), (5, 0), (0, 7), (7, 7)])
    def test_fewer_than_eight_images_always_fails(self, evaluator, modern, lazy):
        counts = ImageryCounts(meaningful=7, modern_format=modern, lazy=lazy)
        assert evaluator.passes(counts) is False

    def test_eight_images_one_modern_no_lazy_passes(self, evaluator):
        assert evaluator.passes(ImageryCounts(meaningful=8, modern_format=1, lazy=0)) is True

    def test_eight_images_lazy_only_passes(self, evaluator):
        assert evaluator.passes(ImageryCounts(meaningful=8, modern_format=0, lazy=3)) is True
        assert evaluator.passes(ImageryCounts(meaningful=8, modern_format=0, lazy=2)) is False

    def test_evaluate_page_with_webp_hero(self, evaluator, page_builder):
        html = page_builder(images=7).replace(
            "</body>", '<img src="/media/hero.webp" alt="Hero"></body>'
        )
        criterion = evaluator.evaluate(ParsedPage(html))

        assert criterion.passed is True
        assert criterion.evidence.startswith("Imagery looks strong.")
        assert "Relevant images: 8 (target 8+)" in criterion.evidence
        assert "Lazy-load: Needs work (0 of 3 target)" in criterion.evidence
        assert "Modern format: Good (1 of 1 target)" in criterion.evidence

    def test_lazy_counted_only_on_meaningful_images(self, evaluator):
        html = """
        <body>
          <img src="/logo.png" loading="lazy">
          <img src="/a.jpg" loading="LAZY">
          <img src="/b.jpg" loading="eager">
        </body>
        """
        counts = evaluator.count(ParsedPage(html).images)
        assert counts == ImageryCounts(meaningful=2, modern_format=0, lazy=1)

    def test_fail_evidence_names_each_shortfall(self, evaluator, page_builder):
        criterion = evaluator.evaluate(ParsedPage(page_builder(images=3)))

        assert criterion.passed is False
        assert criterion.evidence.startswith("Imagery needs improvement.")
        assert "add more high-quality club imagery (currently 3, target at least 8)" in criterion.evidence
        assert "serve hero/gallery images in WebP or AVIF" in criterion.evidence
        assert "(currently 0, target at least 3)" in criterion.evidence

    def test_fail_evidence_only_for_deficient_metrics(self, evaluator, page_builder):
        html = page_builder(images=3, image_attrs='loading="lazy"')
        criterion = evaluator.evaluate(ParsedPage(html))

        assert criterion.passed is False
        assert "currently 3, target at least 8" in criterion.evidence
        assert "enable lazy-loading" not in criterion.evidence
