"""Typed records for FlashArray REST responses and gauge collectors built on them."""

__version__ = "1.0.5"