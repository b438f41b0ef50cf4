"""Boot protocol helpers: boot.yaml parsing, partition headers, boot source templating, and text screen, keyboard, colour prompt and GDT models."""

__version__ = "0.1.0"