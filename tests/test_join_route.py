"""Tests for the join-route check."""

import pytest

from gym_audit.join_route import (
    MISSING_EVIDENCE,
    PRESENT_EVIDENCE,
    JoinRouteEvaluator,
)
from gym_audit.page_parser import Control, ParsedPage


def filler_links(count):
    return "".join(f'<a href="/page-{i}">Page {i}</a>' for i in range(count))


class TestJoinRouteEvaluator:
    """Test suite for JoinRouteEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return JoinRouteEvaluator()

    def test_membership_options_link_is_enough(self, evaluator):
        html = '<body><a href="/somewhere">Membership Options</a></body>'
        route = evaluator.evaluate(ParsedPage(html))

        assert route.present is True
        assert route.evidence == PRESENT_EVIDENCE

    def test_early_online_cta(self, evaluator):
        html = f'<body>{filler_links(5)}<a href="/join-online/bristol">Join now</a></body>'
        assert evaluator.evaluate(ParsedPage(html)).present is True

    def test_cta_after_window_without_other_early_cta(self, evaluator):
        html = f'<body>{filler_links(30)}<a href="/join-online/bristol">Join now</a></body>'
        route = evaluator.evaluate(ParsedPage(html))

        assert route.present is False
        assert route.evidence == MISSING_EVIDENCE
        assert route.candidate_count == 1

    def test_buttons_count_towards_document_order(self, evaluator):
        """A button before the links pushes a late link past the window."""
        cta = '<a href="/join-online/bristol">Join now</a>'
        buttons = "".join(f"<button>Tab {i}</button>" for i in range(25))

        early = f"<body>{filler_links(5)}{cta}</body>"
        late = f"<body>{buttons}{filler_links(5)}{cta}</body>"

        assert evaluator.evaluate(ParsedPage(early)).present is True
        assert evaluator.evaluate(ParsedPage(late)).present is False

    def test_online_href_alone_is_not_a_cta(self, evaluator):
        html = '<body><a href="/checkout">Buy</a></body>'
        assert evaluator.evaluate(ParsedPage(html)).present is False

    def test_early_text_cta_plus_late_online_href(self, evaluator):
        """The early CTA and the online signal may come from different controls."""
        html = (
            "<body><button>Become a member</button>"
            f'{filler_links(40)}<a href="/membership/buy">Membership</a></body>'
        )
        assert evaluator.evaluate(ParsedPage(html)).present is True

    def test_text_cta_without_online_href(self, evaluator):
        html = '<body><button>Get started</button><a href="/contact">Join us today</a></body>'
        assert evaluator.evaluate(ParsedPage(html)).present is False

    def test_no_controls(self, evaluator):
        route = evaluator.evaluate(ParsedPage("<body><p>Nothing here</p></body>"))
        assert route.present is False
        assert route.candidate_count == 0

    def test_is_cta(self, evaluator):
        assert evaluator.is_cta(Control(0, "a", "Start your membership", "/x"))
        assert evaluator.is_cta(Control(0, "a", "Find out more", "/sign-up"))
        assert not evaluator.is_cta(Control(0, "a", "Timetable", "/gyms/x/timetable"))
