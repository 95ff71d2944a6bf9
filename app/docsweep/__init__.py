"""docsweep - localized documentation cleanup for .mdx trees."""

__version__ = "0.1.0"
