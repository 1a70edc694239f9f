import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .bitbucket import BitbucketFetcher
from .config import PROVIDERS, AuditConfig
from .exceptions import ConfigurationError
from .github import GitHubFetcher
from .jira import JiraFetcher
from .logging_config import log_operation, setup_logger
from .readiness import ChangeRequestSource, ReleaseAudit

EXIT_REPOSITORY_FAILURE = 2


def create_change_request_source(provider: str) -> ChangeRequestSource:
    """Build the pull request source for the configured provider.

    Raises:
        ConfigurationError: If the provider's settings are incomplete
    """
    if provider == "bitbucket":
        return BitbucketFetcher()
    return GitHubFetcher()


@click.command()
@click.version_option(__version__)
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
    "--provider",
    type=click.Choice(PROVIDERS),
    help="Where pull requests are hosted (default: github)",
)
@click.option(
    "--repo",
    "repos",
    multiple=True,
    help="Repository to audit (can be used multiple times, overrides AUDIT_REPOS)",
)
@click.option(
    "--closed-limit",
    type=click.IntRange(min=0),
    help="Closed pull requests to audit per repository (0 disables)",
)
@click.option(
    "--details/--no-details",
    default=None,
    help="Print release versions and current sprint of every ticket",
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
    "--jira-sprint-field",
    help="Custom field holding the sprints (default: customfield_10006)",
)
@click.option("--github-token", help="GitHub token")
@click.option("--github-organization", help="GitHub organization owning the repositories")
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
def main(
    verbose: int,
    env_file: str | None,
    provider: str | None,
    repos: tuple[str, ...],
    closed_limit: int | None,
    details: bool | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_sprint_field: str | None,
    github_token: str | None,
    github_organization: str | None,
    log_dir: str | None,
    log_to_file: bool,
) -> None:
    """Release readiness audit.

    Lists the pull requests of every configured repository, looks up the Jira
    tickets named in their titles and reports whether those tickets are in an
    active sprint and have a release version.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    logger = setup_logger(
        name="release-readiness",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        overrides = {
            "AUDIT_PROVIDER": provider,
            "AUDIT_REPOS": ",".join(repos) if repos else None,
            "AUDIT_CLOSED_LIMIT": str(closed_limit) if closed_limit is not None else None,
            "AUDIT_DETAILS": str(details).lower() if details is not None else None,
            "JIRA_URL": jira_url,
            "JIRA_USERNAME": jira_username,
            "JIRA_API_TOKEN": jira_token,
            "JIRA_PERSONAL_TOKEN": jira_personal_token,
            "JIRA_SPRINT_FIELD": jira_sprint_field,
            "GITHUB_TOKEN": github_token,
            "GITHUB_ORGANIZATION": github_organization,
        }
        for name, value in overrides.items():
            if value:
                os.environ[name] = value

        try:
            config = AuditConfig.from_env()
            source = create_change_request_source(config.provider)
            tickets = JiraFetcher()
        except ConfigurationError as e:
            raise click.ClickException(f"Configuration error: {e}") from e

    logger.info(
        f"Auditing {len(config.repositories)} {config.provider} repository(ies)"
    )
    summary = ReleaseAudit(config, source, tickets).run()

    if not summary.succeeded:
        sys.exit(EXIT_REPOSITORY_FAILURE)


__all__ = ["main", "__version__", "create_change_request_source"]

if __name__ == "__main__":
    main()
