"""Package setup for css_url_rewrite."""

from setuptools import setup, find_packages

setup(
    name="css-url-rewrite",
    version="1.0.0",
    description="Rewrite url() references in CSS while preserving formatting",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "tinycss2>=1.2.0",
    ],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "css-url-rewrite=css_url_rewrite.cli:main",
        ],
    },
)
