"""Configuration file for the Sphinx documentation builder.

This file only contains a selection of the most common options. For a full
list see the documentation:
https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import shutil
import subprocess

from tf_complex.adjoint import ADJOINT
from tf_complex.config import get_config

# -- Project information -----------------------------------------------------
project = "tf_complex"
author = "tf_complex developers"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]
exclude_patterns = [
    ".DS_Store",
    "Thumbs.db",
    "_build",
]
source_suffix = [
    ".rst",
]

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_title = "tf_complex"
viewcode_follow_imported_members = True

# -- Options for API ---------------------------------------------------------
add_module_names = False
autodoc_mock_imports = [
    "tensorflow",
]

# Cross-referencing configuration
default_role = "py:obj"
primary_domain = "py"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
}

# -- Generate API skeleton ----------------------------------------------------
shutil.rmtree("api", ignore_errors=True)
subprocess.call(
    " ".join(
        [
            "sphinx-apidoc",
            "-o api/",
            "--force",
            "--no-toc",
            "--separate",
            "../tf_complex/",
            # exclude patterns
            "../tf_complex/tests",
        ]
    ),
    shell=True,
)


# -- Generate available adjoints ----------------------------------------------
def gen_adjoint_list():
    adjoint_doc = """
------------------
Available Adjoints
------------------

"""
    for idx, (k, v) in enumerate(sorted(get_config(ADJOINT).items()), 1):
        adjoint_doc += (
            f'\n{idx}. :code:`"{k}"`'
            f" (`~{v.__module__}.{v.__qualname__}`)\n"
        )

    with open(
        os.path.dirname(os.path.abspath(__file__)) + "/adjoints.rst", "w"
    ) as f:
        f.write(adjoint_doc)


gen_adjoint_list()
