"""Component Hub: browse a catalog of reusable components and export them as LLM-ready Markdown."""

__version__ = "0.1.0"
