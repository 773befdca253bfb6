"""Terminal output for verification runs.

Modules
-------
progress
    ``ProgressIndicator`` writes one mark per processed file to stderr.
report
    ``ReportRenderer`` prints traversal errors and the final summary to
    stdout in a fixed plain-text format.
console
    ``configure_logging`` wires the package loggers to a Rich handler.
"""
