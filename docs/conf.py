"""Sphinx configuration for utf8index documentation."""

import utf8index

project = "utf8index"
copyright = "2026, utf8index contributors"
author = "utf8index contributors"
release = utf8index.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.doctest",
    "sphinx_copybutton",
]

autosummary_generate = True

exclude_patterns = ["_build"]

html_theme = "furo"

# Every operation lives in utf8index.ops.* but is documented under the
# package name it is imported from.
add_module_names = False
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
}
autodoc_typehints = "description"
autodoc_type_aliases = {"BytesLike": "utf8index._utils.BytesLike"}

doctest_global_setup = "from utf8index import *"
