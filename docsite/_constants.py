"""Common literal values used across docsite.

These constants keep placeholder markers, landing names, and navigation styling
centralized so the builder, templates, and tests import the same values without
drifting. Intended for internal use within the docsite package.

Examples
--------
>>> from docsite import _constants
>>> _constants.TITLE_MARKER
'<!-- TITLE -->'
>>> _constants.LANDING_SLUG
'index.html'
"""

TITLE_MARKER = "<!-- TITLE -->"
CONTENT_MARKER = "<!-- CONTENT -->"
NAVIGATION_MARKER = "<!-- NAVIGATION_LINKS -->"
FOOTER_MARKER = "<!-- NAV_FOOTER -->"

LANDING_NAME = "index.md"
LANDING_SLUG = "index.html"
MARKDOWN_SUFFIXES = (".md",)
HTML_SUFFIX = ".html"
FALLBACK_TITLE = "Untitled"

NAV_LINK_BASE_CLASS = "block px-2 py-2 text-sm font-medium"
NAV_LINK_DEFAULT_CLASS = "text-gray-700"
NAV_LINK_ACTIVE_CLASS = "active text-indigo-600 bg-indigo-50"
NAV_LINK_TRAILING_CLASS = "rounded-md hover:bg-gray-100 group flex items-center"
FOOTER_LINK_CLASS = "text-indigo-600 font-medium hover:text-indigo-800"
