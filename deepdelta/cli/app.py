from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
import json
import logging
from pathlib import Path
import sys
from typing import Any

import typer

from deepdelta.differ import (
    assert_documents,
    diff_documents,
    render_diff_summary,
    render_differences,
)
from deepdelta.exceptions import DocumentError
from deepdelta.io import load_document

app = typer.Typer(help="deepdelta CLI")

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "DEEPDELTA_LOG_LEVEL"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("deepdelta")
    except PackageNotFoundError:
        from deepdelta import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


def _configure_logging(level_name: str) -> None:
    level = level_name.strip().upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"expected one of {', '.join(_LOG_LEVELS)}",
            param_hint="--log-level",
        )
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show deepdelta version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Logging level written to stderr.",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    _configure_logging(log_level)


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
            allow_nan=False,
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
            allow_nan=False,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_error_json(message: str, *, old: Path, new: Path) -> None:
    _echo_json(
        {
            "status": "error",
            "exit_code": 1,
            "message": message,
            "old_path": str(old),
            "new_path": str(new),
        }
    )


def _echo_result_json(
    payload: dict[str, Any],
    *,
    command: str,
    old: Path,
    new: Path,
) -> None:
    # Strict JSON has no NaN or Infinity tokens.
    try:
        _echo_json(payload)
    except ValueError as error:
        _echo_error_json(
            f"{command} failed: result contains non-finite numbers ({error})",
            old=old,
            new=new,
        )
        raise typer.Exit(code=1) from error


def _load_pair(
    old: Path,
    new: Path,
    *,
    command: str,
    json_output: bool,
) -> tuple[Any, Any]:
    try:
        return load_document(old), load_document(new)
    except DocumentError as error:
        logger.debug("%s failed to load documents", command, exc_info=True)
        message = f"{command} failed: {error}"
        if json_output:
            _echo_error_json(message, old=old, new=new)
        else:
            _echo(message, err=True)
        raise typer.Exit(code=1) from error


@app.command()
def diff(
    old: Path = typer.Argument(..., help="Path to the old JSON document."),
    new: Path = typer.Argument(..., help="Path to the new JSON document."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Diff two JSON documents."""
    old_document, new_document = _load_pair(old, new, command="diff", json_output=json_output)
    result = diff_documents(old_document, new_document)

    if json_output:
        _echo_result_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "old_path": str(old),
                "new_path": str(new),
            },
            command="diff",
            old=old,
            new=new,
        )
        return

    _echo(render_diff_summary(result))
    _echo(render_differences(result, max_changes=max_changes))


@app.command("assert")
def assert_command(
    expected: Path = typer.Argument(..., help="Path to the expected JSON document."),
    actual: Path = typer.Argument(..., help="Path to the actual JSON document."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Fail with exit code 1 when two JSON documents differ."""
    expected_document, actual_document = _load_pair(
        expected,
        actual,
        command="assert",
        json_output=json_output,
    )
    result = assert_documents(expected_document, actual_document)

    if json_output:
        _echo_result_json(
            {
                **result.to_dict(),
                "message": "assertion passed" if result.passed else "assertion failed",
                "old_path": str(expected),
                "new_path": str(actual),
            },
            command="assert",
            old=expected,
            new=actual,
        )
    elif result.passed:
        _echo("assertion passed: documents are identical")
    else:
        _echo(f"assertion failed: {render_diff_summary(result.diff)}", err=True)
        _echo(render_differences(result.diff, max_changes=max_changes), err=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
