"""Web app publishing the version-control how-to document and its glossary."""

__version__ = "1.0.0"
