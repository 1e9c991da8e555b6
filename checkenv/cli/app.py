"""
CLI 入口模块 - 使用 Typer 构建命令行界面

检查流程：
1. 解析参数
2. 扫描代码库
3. 对照当前环境输出缺失的变量
"""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from checkenv.core import scan, ScanRequest, ScanError
from checkenv.core.scanner import DEFAULT_IGNORE_DIRS, DEFAULT_WORKERS
from checkenv.reporters import TextReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="checkenv",
    help="checkenv: find process.env variables your code uses but your environment lacks.",
    add_completion=False,
)

# 报告输出到 stdout，进度信息输出到 stderr
console = Console()
err_console = Console(stderr=True)

MISSING_FLAGS_MESSAGE = (
    "You must specify the directories and file extensions to scan "
    "using the -dirs and -exts flags."
)


def print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, emoji=False)


def version_callback(value: bool) -> None:
    if value:
        from checkenv import __version__
        console.print(f"[bold]checkenv[/bold] v{__version__}")
        raise typer.Exit()


@app.command()
def check(
    dirs: Optional[str] = typer.Option(
        None,
        "-dirs",
        "--dirs",
        envvar="CHECKENV_DIRS",
        help="Comma-separated list of directories to scan",
        show_envvar=False,
    ),
    exts: Optional[str] = typer.Option(
        None,
        "-exts",
        "--exts",
        envvar="CHECKENV_EXTS",
        help="Comma-separated list of file extensions to scan, e.g. .js,.ts",
        show_envvar=False,
    ),
    ignore: str = typer.Option(
        ",".join(DEFAULT_IGNORE_DIRS),
        "-ignore",
        "--ignore",
        envvar="CHECKENV_IGNORE",
        help="Comma-separated list of path prefixes to ignore",
        show_envvar=False,
    ),
    workers: int = typer.Option(
        DEFAULT_WORKERS,
        "--workers",
        "-w",
        min=1,
        envvar="CHECKENV_WORKERS",
        help="Number of files scanned concurrently",
        show_envvar=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show scanned files on stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Report environment variables referenced as process.env.NAME that are unset or empty.

    Examples:
        checkenv -dirs src -exts .js
        checkenv -dirs src,lib -exts .js,.ts -ignore node_modules,dist
    """
    if not dirs or not exts:
        print_error(MISSING_FLAGS_MESSAGE)
        raise typer.Exit(1)

    request = ScanRequest.from_strings(dirs, exts, ignore, workers=workers)

    on_file = None
    if verbose:
        roots = escape(", ".join(request.roots))
        err_console.print(f"[dim]Scanning {roots} with {request.workers} workers...[/dim]", emoji=False)

        def on_file(file_path: str) -> None:
            err_console.print(f"[dim]  {escape(file_path)}[/dim]", soft_wrap=True, emoji=False)

    try:
        result = scan(request, on_file=on_file)
    except ScanError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if verbose:
        err_console.print(f"[dim]  Scanned {result.files_scanned} files[/dim]")
        if result.files_skipped:
            err_console.print(f"[dim]  Skipped {result.files_skipped} unreadable files[/dim]")
        err_console.print(f"[dim]  - {len(result.discovered)} referenced variables[/dim]")

    TextReporter(console).report(result.discovered, os.environ)


if __name__ == "__main__":
    app()
