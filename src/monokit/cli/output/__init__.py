"""Console rendering helpers."""

from monokit.cli.output.console import console_reporter, print_batch_summary

__all__ = ["console_reporter", "print_batch_summary"]
