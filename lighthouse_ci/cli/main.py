# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
runlighthouse - Main entry point

Runs Lighthouse CI for the pull request of the current build. Pull request
identity comes from Travis CI or CircleCI variables, or from the local git
branch looked up on GitHub. Builds without a pull request exit 0.
"""

from typing import Optional

import click

from lighthouse_ci import __version__
from lighthouse_ci.classes import Configuration, Runner
from lighthouse_ci.cli.helpers import (
    LighthouseCommand,
    LighthouseUsageError,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_help_and_exit,
    validate_score,
)
from lighthouse_ci.constants import EXIT_RUN_FAILED
from lighthouse_ci.resolver import resolve_pull_request
from lighthouse_ci.runners import invoke_run
from lighthouse_ci.settings import Settings
from lighthouse_ci.utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVELS, setup_logging

PROG_NAME = 'runlighthouse'

EXAMPLES = """Examples:

\b
  Runs Lighthouse and posts a summary of the results.
    runlighthouse https://example.com

\b
  Fails the PR if the score drops below 93. Posts the summary comment.
    runlighthouse --score=93 https://example.com

\b
  Runs Lighthouse on WebPageTest. Fails the PR if the score drops below 93.
    runlighthouse --score=93 --runner=wpt --no-comment https://example.com
"""


@click.command(
    name=PROG_NAME,
    cls=LighthouseCommand,
    context_settings={'help_option_names': []},
    epilog=EXAMPLES,
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option(
    '-h',
    '--help',
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=show_help_and_exit,
    help='Prints help.',
)
@click.option(
    '--score',
    type=float,
    default=None,
    callback=validate_score,
    help='Minimum score for the pull request to be considered "passing". '
    'If omitted, merging the PR will be allowed no matter what the score.',
)
@click.option(
    '--comment/--no-comment',
    default=True,
    help='Post (or skip) a comment to the PR issue summarizing the Lighthouse results.',
)
@click.option(
    '--runner',
    type=click.Choice(Runner.names()),
    default=Runner.CHROME.value,
    show_default=True,
    help='Selects Lighthouse running on Chrome or WebPageTest.',
)
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help='Logging level.',
)
@click.argument('url', required=False)
@click.pass_context
def runlighthouse(
    ctx: click.Context, url: Optional[str], score: Optional[float], comment: bool, runner: str, log_level: str
):
    """Run Lighthouse CI against URL for the current pull request."""
    setup_logging(log_level)

    if not url or not url.strip():
        raise LighthouseUsageError('Please provide a url to test.', ctx=ctx)

    if not comment and (score is None or score <= 0):
        raise LighthouseUsageError('Please provide a --score when using --no-comment.', ctx=ctx)

    selected_runner = Runner(runner)
    print_info(f'Using runner: {selected_runner.value}')

    settings = Settings.from_env()
    settings.warn_deprecations()

    resolution = resolve_pull_request(settings)
    if not resolution.ok:
        print_warning('Lighthouse is not run for non-PR commits.')
        print_info(f'Reason: {resolution.reason}')
        return

    pull_request = resolution.context
    config = Configuration(
        test_url=url.strip(),
        add_comment=comment,
        min_pass_score=score,
        runner=selected_runner,
        pr=pull_request.pr,
        repo=pull_request.repo,
    )

    summary = invoke_run(config, settings)
    if summary is None:
        print_error(
            'Lighthouse CI failed',
            f'{selected_runner.value} run for {pull_request.repo.full_name} {pull_request.pr}',
        )
        ctx.exit(EXIT_RUN_FAILED)

    print_success(summary)


def main():
    """Main entry point for the CLI"""
    runlighthouse()


if __name__ == '__main__':
    main()
