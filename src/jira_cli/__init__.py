import os

import click
from dotenv import load_dotenv
from requests.exceptions import HTTPError

__version__ = "0.3.0"

from .backport import IssueCloner
from .exceptions import JiraCLIAuthenticationError, JiraCLIError
from .jira import JiraConfig, JiraFetcher
from .logging_config import log_operation, setup_logger
from .utils import is_valid_issue_key, is_valid_project_key


def _get_fetcher(ctx: click.Context) -> JiraFetcher:
    """Return the Jira client of this invocation, creating it on first use."""
    if ctx.obj.get("fetcher") is None:
        ctx.obj["fetcher"] = JiraFetcher(config=JiraConfig.from_env())
    return ctx.obj["fetcher"]


@click.group()
@click.version_option(__version__, prog_name="jira-cli")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net or https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username/email (for Jira Cloud)")
@click.option("--jira-token", help="Jira API token (for Jira Cloud)")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """Jira CLI - search issues and backport them into other projects.

    Supports both Atlassian Cloud and Jira Server/Data Center deployments.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    logger = setup_logger(
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file)
    else:
        logger.debug("Attempting to load environment from default .env file")
        load_dotenv()

    # Command line arguments take precedence over the environment
    if jira_url:
        os.environ["JIRA_URL"] = jira_url
    if jira_username:
        os.environ["JIRA_USERNAME"] = jira_username
    if jira_token:
        os.environ["JIRA_API_TOKEN"] = jira_token
    if jira_personal_token:
        os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
    if jira_ssl_verify is not None:
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

    ctx.ensure_object(dict)
    ctx.obj["logger"] = logger


@main.command()
@click.argument("jql")
@click.argument("link_name")
@click.option(
    "--project-key",
    required=True,
    help="Key of the project receiving the backports (e.g., XYZ)",
)
@click.option(
    "--component",
    "component_ids",
    multiple=True,
    help="Component ID set on created backports (can be used multiple times)",
)
@click.option(
    "--only",
    "only_keys",
    multiple=True,
    help="Only backport these issue keys (can be used multiple times)",
)
@click.option(
    "--create/--dry-run",
    default=False,
    help="Create missing backports instead of only listing them (default: dry run)",
)
@click.pass_context
def backport(
    ctx: click.Context,
    jql: str,
    link_name: str,
    project_key: str,
    component_ids: tuple[str, ...],
    only_keys: tuple[str, ...],
    create: bool,
) -> None:
    """List issues matching JQL and backport those without a LINK_NAME link."""
    if not is_valid_project_key(project_key):
        raise click.BadParameter(
            f"'{project_key}' is not a valid project key", param_hint="--project-key"
        )
    for issue_key in only_keys:
        if not is_valid_issue_key(issue_key):
            raise click.BadParameter(
                f"'{issue_key}' is not a valid issue key", param_hint="--only"
            )

    logger = ctx.obj["logger"]

    try:
        fetcher = _get_fetcher(ctx)
        cloner = IssueCloner(
            fetcher, copy_custom_fields=fetcher.config.copy_custom_fields
        )

        with log_operation(logger, "backport", link_name=link_name):
            created = 0
            # Collect all pairs first; creating backports may change the result set
            for issue, linked_issue in cloner.get_issues(jql, link_name):
                if linked_issue is not None:
                    status = cloner.get_issue_status_name(linked_issue)
                    click.echo(
                        f"{issue.key}: {issue.summary} -> {linked_issue.key} [{status}]"
                    )
                    continue

                click.echo(f"{issue.key}: {issue.summary} (no backport)")
                if not create or (only_keys and issue.key not in only_keys):
                    continue

                new_issue_key = cloner.create_linked_issue(
                    issue, project_key, link_name, component_ids
                )
                created += 1
                click.echo(f"  created {new_issue_key}")

            if create:
                click.echo(f"Created {created} backport(s) in {project_key}")
    except (JiraCLIError, JiraCLIAuthenticationError, HTTPError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.pass_context
def projects(ctx: click.Context) -> None:
    """List the keys of all visible projects."""
    try:
        for project_key in _get_fetcher(ctx).get_project_keys():
            click.echo(project_key)
    except (JiraCLIAuthenticationError, HTTPError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@main.command("link-types")
@click.pass_context
def link_types(ctx: click.Context) -> None:
    """List the available issue link types."""
    try:
        for link_type in _get_fetcher(ctx).get_issue_link_types():
            click.echo(f"{link_type.name}: {link_type.inward} / {link_type.outward}")
    except (JiraCLIAuthenticationError, HTTPError, ValueError) as e:
        raise click.ClickException(str(e)) from e


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
