"""Project task runner: installs tools, runs tests, serves and builds the course."""

from __future__ import annotations

import argparse
import enum
import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Union

PathArg = Union[str, "os.PathLike[str]"]


class Task(enum.Enum):
    """A task the runner can execute."""

    INSTALL_TOOLS = "install-tools"
    WEB_TESTS = "web-tests"
    RUST_TESTS = "rust-tests"
    SERVE = "serve"
    BUILD = "build"


_TASK_HELP = {
    Task.INSTALL_TOOLS: "Installs the tools the project depends on.",
    Task.WEB_TESTS: "Runs the web driver tests in the tests directory.",
    Task.RUST_TESTS: "Tests all included code snippets.",
    Task.SERVE: "Starts a web server with the course.",
    Task.BUILD: "Create a static version of the course in the `book/` directory.",
}


class TaskError(RuntimeError):
    """Raised when a task's command fails."""


def _cargo() -> str:
    return os.environ.get("CARGO", "cargo")


def _run(command: Sequence[str], *, cwd: PathArg | None = None, description: str) -> int:
    try:
        completed = subprocess.run(list(command), cwd=cwd)
    except OSError as exc:
        raise TaskError(f"Failed to execute {description}: {exc}") from exc
    return completed.returncode


def install_tools(workspace_dir: PathArg) -> None:
    """Install the book tools with ``cargo install``."""
    print("Installing project tools...")
    workspace = Path(workspace_dir)
    install_args = [
        # --locked keeps builds reproducible and the plugins in step with mdbook.
        ["mdbook", "--locked", "--version", "0.4.48"],
        ["mdbook-svgbob", "--locked", "--version", "0.2.2"],
        ["mdbook-pandoc", "--locked", "--version", "0.10.4"],
        ["mdbook-i18n-helpers", "--locked", "--version", "0.3.6"],
        ["i18n-report", "--locked", "--version", "0.2.0"],
        ["mdbook-linkcheck2", "--locked", "--version", "0.9.1"],
        ["--path", str(workspace / "mdbook-exerciser"), "--locked"],
        ["--path", str(workspace / "mdbook-course"), "--locked"],
    ]
    for args in install_args:
        code = _run([_cargo(), "install", *args], description="cargo install")
        if code != 0:
            raise TaskError(
                f"Command 'cargo install {' '.join(args)}' exited with status code: {code}"
            )


def _run_in_workspace(command: Sequence[str], cwd: Path, task_name: str) -> None:
    code = _run(command, cwd=cwd, description=" ".join(command))
    if code != 0:
        raise TaskError(
            f"Command 'cargo xtask {task_name}' exited with status code: {code}"
        )


def run_web_tests(workspace_dir: PathArg) -> None:
    """Run the web driver tests with ``npm test``."""
    print("Running web tests...")
    _run_in_workspace(["npm", "test"], Path(workspace_dir) / "tests", "web-tests")


def run_rust_tests(workspace_dir: PathArg) -> None:
    """Test the code snippets of the book with ``mdbook test``."""
    print("Running rust tests...")
    _run_in_workspace(["mdbook", "test"], Path(workspace_dir), "rust-tests")


def start_web_server(workspace_dir: PathArg) -> None:
    """Serve the course with ``mdbook serve``."""
    print("Starting web server ...")
    _run_in_workspace(["mdbook", "serve"], Path(workspace_dir), "serve")


def build(workspace_dir: PathArg) -> None:
    """Build a static copy of the course with ``mdbook build``."""
    print("Building course...")
    _run_in_workspace(["mdbook", "build"], Path(workspace_dir), "build")


_RUNNERS = {
    Task.INSTALL_TOOLS: install_tools,
    Task.WEB_TESTS: run_web_tests,
    Task.RUST_TESTS: run_rust_tests,
    Task.SERVE: start_web_server,
    Task.BUILD: build,
}


def execute_task(task: Union[Task, str], workspace_dir: PathArg) -> None:
    """Run ``task`` in ``workspace_dir``."""
    _RUNNERS[Task(task)](workspace_dir)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Execute tasks within the course project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\n".join(f"  {task.value:<14} {text}" for task, text in _TASK_HELP.items()),
    )
    parser.add_argument(
        "task",
        choices=[task.value for task in Task],
        help="the task to execute",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the task from ``argv`` and run it in the workspace directory."""
    args = _parser().parse_args(argv)
    workspace = os.environ.get("CARGO_WORKSPACE_DIR") or os.getcwd()
    try:
        execute_task(args.task, workspace)
    except TaskError as exc:
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())