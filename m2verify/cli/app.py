"""Main Typer application.

Entry point: ``m2verify`` (configured via pyproject.toml scripts).

Usage::

    m2verify (--test|--clean) [DIRECTORY ...]

The mode flag is matched positionally rather than declared as a Typer
option so that a missing or unknown mode can be reported with the
``[ERROR] Illegal arguments`` line and exit code 1.
"""

from __future__ import annotations

from pathlib import Path

import typer

from m2verify.config import config
from m2verify.core.cleaner import DryRunCleaner
from m2verify.core.verifier import RepositoryVerifier
from m2verify.monitor.console import configure_logging
from m2verify.monitor.report import ReportRenderer

USAGE = "Usage: m2verify (--test|--clean) [DIRECTORIES ...]"

MODE_TEST = "--test"
MODE_CLEAN = "--clean"

EXIT_USAGE = 1
EXIT_FAILURES = 2

app = typer.Typer(
    name="m2verify",
    help="Verify SHA-1 sidecars and jar archives in a local Maven repository.",
    rich_markup_mode="rich",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def verify_cmd(
    args: list[str] | None = typer.Argument(
        None,
        metavar="(--test|--clean) [DIRECTORY ...]",
        help="Mode followed by the repository directories to scan.",
        show_default=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not print the progress stream on stderr.",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Number of files checked in parallel.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject sidecars with anything but whitespace after the digest.",
    ),
) -> None:
    """Check every .sha1 sidecar and .jar archive under the given directories.

    Without directories, ~/.m2/repository is scanned.  [bold]--clean[/bold]
    currently behaves like [bold]--test[/bold]: nothing is deleted.
    """
    renderer = ReportRenderer()

    if not args:
        renderer.print_usage(USAGE)
        raise typer.Exit(code=EXIT_USAGE)

    mode, *directories = args
    if mode not in (MODE_TEST, MODE_CLEAN):
        renderer.console.print(f"[ERROR] Illegal arguments: {' '.join(args)}")
        renderer.print_usage(USAGE)
        raise typer.Exit(code=EXIT_USAGE)

    overrides: dict[str, object] = {}
    if quiet:
        overrides["show_progress"] = False
    if workers is not None:
        overrides["workers"] = workers
    if strict:
        overrides["strict_checksum"] = True
    settings = config.model_copy(update=overrides)
    configure_logging(settings.log_level)

    roots = [Path(d) for d in directories] or [settings.default_repository]
    clean = mode == MODE_CLEAN

    verifier = RepositoryVerifier(
        settings,
        renderer=renderer,
        cleaner=DryRunCleaner() if clean else None,
    )
    summary = verifier.verify(roots, clean=clean)
    renderer.print_summary(summary)

    if settings.fail_on_errors and not summary.passed:
        raise typer.Exit(code=EXIT_FAILURES)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
