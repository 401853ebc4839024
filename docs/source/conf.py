import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "LiveURL"
copyright = "2026, LiveURL Developers"
author = "LiveURL Developers"
import liveurl

release = liveurl.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

# Intersphinx mapping for external references
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "structlog": ("https://www.structlog.org/en/stable", None),
}

# Suppress warnings (cosmetic issues that don't affect documentation)
suppress_warnings = [
    "myst.xref_missing",
    "ref.python",  # Duplicate cross-reference warnings from re-exports
]

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "both"
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "LiveURL"
