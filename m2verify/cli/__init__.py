"""m2verify CLI — Typer-based command-line interface.

Provides the ``m2verify`` command.  Report output is plain text on stdout;
the progress stream and log records go to stderr via Rich.
"""
