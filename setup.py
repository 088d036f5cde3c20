import io

from setuptools import find_packages
from setuptools import setup

with io.open("README.md", "rt", encoding="utf8") as f:
    readme = f.read()

tests_require = [
    "pymongo",
    "pytest",
    "pytest-cov",
    "pytest-mock",
    "SQLAlchemy>=2.0",
]

setup(
    name="Folio",
    version="1.0.0",
    description="Page slicing and pagination links for Flask applications.",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="BSD",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    zip_safe=False,
    platforms="any",
    python_requires=">=3.8",
    install_requires=[
        "Babel",
        "click>=8.0",
        "Flask",
        "inifile>=0.4.1",
        "Jinja2>=3.0",
        "MarkupSafe",
    ],
    tests_require=tests_require,
    extras_require={
        "mongo": ["pymongo"],
        "sqlalchemy": ["SQLAlchemy>=2.0"],
        "test": tests_require,
    },
    classifiers=[
        "Environment :: Web Environment",
        "Framework :: Flask",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    entry_points="""
        [console_scripts]
        folio=folio.cli:main
    """,
)
