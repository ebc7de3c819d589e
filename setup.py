from setuptools import setup, find_packages

version = {}
with open("tf_complex/version.py") as fp:
    exec(fp.read(), version)
# later on we use: version['__version__']

with open("README.md", "r") as fh:
    long_description = fh.read()

name = "tf_complex"

setup(
    name=name,
    version=version["__version__"],
    description="Complex numbers with Annex G special values and reverse-mode adjoints for Tensorflow",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(exclude=["docs"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "tensorflow>=2.0",
        "numpy>=1.20",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest", "sympy"],
        "doc": ["sphinx", "sphinx_rtd_theme"],
    },
    command_options={
        "build_sphinx": {
            "project": ("setup.py", name),
            "version": ("setup.py", version["__version__"]),
            "release": ("setup.py", version["__version__"]),
            "source_dir": ("setup.py", "docs"),
        }
    },
)
