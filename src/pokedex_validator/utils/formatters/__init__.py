"""Output formatting utilities."""

from .console_formatter import format_id_header, format_summary

__all__ = ["format_id_header", "format_summary"]
