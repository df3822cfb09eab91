# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

# -- Project information -----------------------------------------------------

project = 'unitbase'
copyright = '2025, unitbase contributors'
author = 'unitbase contributors'
html_title = 'unitbase Docs'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

autodoc_member_order = "bysource"

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "light_css_variables": {
        "color-brand-primary": "#2f7d5b",
        "color-brand-content": "#1d4f3a",
    },
    "dark_css_variables": {
        "color-brand-primary": "#6fcf97",
        "color-brand-content": "#a8e6c1",
    },
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
