# src/gym_audit/constants.py
"""Centralized constants for the gym landing page audit.

This module contains the fixed vocabularies and site constants shared by the
evaluators. They are loaded once at import time and never mutated. For
user-configurable thresholds, see config.py and AuditThresholds.
"""

import re
from typing import NamedTuple, Pattern


# =============================================================================
# Site Constants
# =============================================================================

SITE_BASE = "https://www.nuffieldhealth.com"

DEFAULT_SITEMAP_URL = f"{SITE_BASE}/sitemap_gyms.xml"

DEFAULT_USER_AGENT = "NuffieldGymAuditBot/1.0 (+internal assessment)"

# Matches /gyms/{slug} with no further path segments, trailing slash optional
GYM_URL_PATTERN = re.compile(r"^https://www\.nuffieldhealth\.com/gyms/([^/?#]+)/?$")

# Slugs under /gyms/ that are hubs, closures or campaigns rather than clubs
NON_GYM_SLUGS = frozenset({
    'membership',
    'services',
    'day-passes',
    'public-services',
    '247',
    'virtual-club-tour',
    'gyms-in-london',
    'gyms-in-glasgow',
    'club-in-club-social',
    'club-in-club-sporty',
    'nhanniversary',
    'health-mot-online-booking-coming-soon',
    'merton-abbey-gym-closure',
    'barrow',
    'canary-wharf-gym',
    'crawley-central-gym',
})


# =============================================================================
# Crawler Constants
# =============================================================================

DEFAULT_CONCURRENCY = 8

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_DATA_DIR = "data"

DEFAULT_DOCS_DIR = "docs"

JSON_REPORT_FILENAME = "audit-report.json"

CSV_REPORT_FILENAME = "audit-report.csv"

HTML_REPORT_FILENAME = "index.html"


# =============================================================================
# Facilities Vocabulary
# =============================================================================

class FacilityTerm(NamedTuple):
    """One facility the page copy is scanned for."""
    key: str
    label: str
    pattern: Pattern[str]


CORE_FACILITIES = (
    FacilityTerm('gym', 'Gym', re.compile(r'\bgym\b|gym floor|fitness suite')),
    FacilityTerm('sauna', 'Sauna', re.compile(r'\bsauna\b')),
    FacilityTerm('steam', 'Steam', re.compile(r'\bsteam\b|steam room')),
    FacilityTerm('pool', 'Pool', re.compile(r'\bpool\b|swimming pool')),
    FacilityTerm('pt', 'PT', re.compile(r'\bpersonal training\b|\bpt\b')),
    FacilityTerm('classes', 'Classes', re.compile(r'\bclasses?\b|group exercise|studio classes')),
)

# Open vocabulary used by the "open" facilities strategy
FACILITY_TERMS = (
    'gym floor',
    'fitness suite',
    'free weights',
    'resistance machines',
    'cardio',
    'functional training',
    'swimming pool',
    'pool',
    'sauna',
    'steam room',
    'spa pool',
    'jacuzzi',
    'hydrotherapy',
    'studio',
    'cycle studio',
    'group exercise',
    'classes',
    'personal training',
    'physiotherapy',
    'health assessment',
    'health mot',
    'tennis',
    'squash',
    'badminton',
    'sports hall',
    'creche',
    'kids club',
    'cafe',
    'lounge',
    'changing rooms',
    'lockers',
    'towels',
    'parking',
    'wifi',
)

FACILITIES_HEADING_PATTERN = re.compile(r'facilit|amenit', re.IGNORECASE)


# =============================================================================
# Imagery Constants
# =============================================================================

IGNORED_IMAGE_PATTERN = re.compile(r'logo|icon|sprite|favicon|social|avatar')

MODERN_FORMAT_MARKERS = ('.webp', '.avif', 'format=webp', 'f_auto')


# =============================================================================
# Join Route Vocabulary
# =============================================================================

JOIN_TEXT_TERMS = (
    'join',
    'join now',
    'join online',
    'become a member',
    'membership',
    'start your membership',
    'get started',
)

JOIN_HREF_PATTERN = re.compile(r'join|membership|become-a-member|start|signup|sign-up')

ONLINE_SIGNAL_PATTERN = re.compile(r'join|membership|become-a-member|buy|checkout')

MEMBERSHIP_OPTIONS_PATTERN = re.compile(r'membership options', re.IGNORECASE)


# =============================================================================
# Description Tone Vocabulary
# =============================================================================

APPEAL_TERMS = (
    'modern',
    'state-of-the-art',
    'expert',
    'friendly',
    'support',
    'wellbeing',
    'community',
    'spacious',
    'premium',
    'motivating',
    'award',
    'refurbished',
)

BENEFIT_TERMS = (
    'help you',
    'whether you',
    'whatever your goal',
    'tailored',
    'personalised',
    'achieve',
    'improve',
    'feel better',
)


# =============================================================================
# Relevance Gate Vocabulary
# =============================================================================

SUB_NAV_SECTIONS = ('timetable', 'classes', 'services')

GYM_WORDS_PATTERN = re.compile(r'gym|health club|fitness', re.IGNORECASE)

JOIN_WORDS_PATTERN = re.compile(r'join|membership', re.IGNORECASE)

CLOSURE_OR_PROMO_PATTERN = re.compile(
    r'closure|coming soon|closed|promo|anniversary', re.IGNORECASE
)
