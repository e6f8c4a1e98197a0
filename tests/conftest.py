"""Shared fixtures for the gym audit tests."""

import pytest

from helpers import build_page


@pytest.fixture
def page_builder():
    """Return the page builder so tests can tweak one part at a time."""
    return build_page


@pytest.fixture
def full_gym_html():
    """A page that passes every criterion."""
    links = (
        '<a href="/gyms/cannon-street/timetable">Timetable</a>'
        '<a href="/join/cannon-street">Join now</a>'
    )
    body = (
        "Our gym floor is fully equipped. Relax in the sauna and steam room, "
        "swim in the pool, book personal training or try our group exercise classes."
    )
    return build_page(
        description="Join Cannon Street gym for modern facilities and friendly expert support.",
        body=body,
        images=8,
        image_attrs='loading="lazy" srcset="/media/club.webp 1x"',
        links=links,
    )
