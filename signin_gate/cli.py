# AGPL-3.0 License

"""CLI surface for the sign-in pull request check."""

import asyncio
from typing import Optional

import typer

from signin_gate.config_loader import get_settings
from signin_gate.git_providers.event_context import TriggerContextError, load_event, load_token
from signin_gate.git_providers.github_provider import GithubProvider
from signin_gate.log import LoggingFormat, get_logger, setup_logger
from signin_gate.tools.pr_signin_check import EXIT_FAILED, PRSignInCheck

app = typer.Typer(
    name="signin-gate",
    help=(
        "Validate a classroom sign-in pull request: one new folder "
        "students/YYYY-MM-DD-identifier/ holding index.html, optionally one "
        ".png and one .css, each at most 100 KB."
    ),
    add_completion=False,
)


async def _run_check(event_path: Optional[str], event_name: Optional[str], publish: bool) -> int:
    try:
        event = load_event(event_path, event_name)
        token = load_token()
    except TriggerContextError as exc:
        get_logger().error(f"❌ {exc}")
        return EXIT_FAILED

    async with GithubProvider(event, token) as provider:
        tool = PRSignInCheck(event, provider, publish_output=None if publish else False)
        return await tool.run()


@app.command()
def check(
    event_path: Optional[str] = typer.Option(
        None,
        "--event-path",
        envvar="GITHUB_EVENT_PATH",
        help="Pull request event payload file.",
    ),
    event_name: Optional[str] = typer.Option(
        None,
        "--event-name",
        envvar="GITHUB_EVENT_NAME",
        help="Name of the triggering event.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to config.log_level).",
    ),
    publish: bool = typer.Option(
        True,
        "--publish/--no-publish",
        help="Post the result as a pull request comment.",
    ),
) -> None:
    """Check the pull request and exit 0 on pass, 1 on any violation."""
    settings = get_settings()
    setup_logger(
        log_level or settings.config.log_level,
        LoggingFormat(str(settings.config.get("log_format", "CONSOLE")).upper()),
    )

    code = asyncio.run(_run_check(event_path, event_name, publish))
    raise typer.Exit(code)


def run():
    app()
