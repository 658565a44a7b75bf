"""
jira-versions - Create Jira versions for Jenkins releases.

Reads every Jenkins core and plugin release from the Maven repository and
creates the matching released versions in the JENKINS Jira project.
Versions that already exist are left alone, so the command can be re-run
at any time.

Usage:
    # Sync everything
    jira-versions -jiraBaseUrl https://issues.jenkins.io

    # Skip alpha/beta releases
    jira-versions -jiraBaseUrl https://issues.jenkins.io -no-experimental

    # Show what would be created
    jira-versions -jiraBaseUrl https://issues.jenkins.io --dry-run

Credentials are read from ~/.jenkins-ci.org (keys userName and password).
Without that file the tool talks to Jira anonymously.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from ..adapters.config import CredentialsFile, EnvironmentConfigProvider
from ..adapters.jira import JiraVersionAdapter
from ..adapters.maven import ExperimentalFilter, MavenReleaseRepository
from ..adapters.updatecenter import UpdateCenterClient
from ..application.sync import (
    RetryPolicy,
    SessionManager,
    SyncResult,
    VersionReconciler,
    VersionSyncOrchestrator,
)
from ..core.domain.events import EventBus
from ..core.exceptions import ConfigError
from ..core.ports.config_provider import AppConfig
from ..core.ports.release_repository import ReleaseRepositoryPort
from .exit_codes import ExitCode


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="jira-versions",
        description="Create Jira versions for Jenkins core and plugin releases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-no-experimental", "--no-experimental",
        dest="no_experimental",
        action="store_true",
        help="Exclude alpha/beta releases"
    )

    parser.add_argument(
        "-jiraBaseUrl", "--jira-base-url",
        dest="jira_base_url",
        type=str,
        help="The base URL for the JIRA instance to add versions to (or set JIRA_URL)"
    )

    parser.add_argument(
        "--project", "-p",
        type=str,
        help="Jira project key receiving the versions (default: JENKINS)"
    )

    parser.add_argument(
        "--credentials",
        type=str,
        help="Credentials properties file (default: ~/.jenkins-ci.org)"
    )

    parser.add_argument(
        "--repository-url",
        type=str,
        help="Maven repository root holding Jenkins releases"
    )

    parser.add_argument(
        "--update-center-url",
        type=str,
        help="Update center JSON listing plugins and deprecations"
    )

    parser.add_argument(
        "--max-auth-retries",
        type=int,
        help="Give up after this many re-logins for one version (default: never)"
    )

    parser.add_argument(
        "--retry-backoff",
        type=float,
        help="Seconds to wait before each re-login"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (default: none)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the versions that would be created without creating them"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def load_config(args: argparse.Namespace, parser: ArgumentParser) -> AppConfig:
    """Merge CLI arguments with the environment; usage errors exit."""
    provider = EnvironmentConfigProvider(cli_overrides=vars(args))
    try:
        config = provider.load()
    except ConfigError as e:
        parser.error(e.message)

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))
    return config


def create_repository(
    config: AppConfig,
    update_center: UpdateCenterClient,
) -> ReleaseRepositoryPort:
    """Build the release repository, excluding alpha/beta releases if asked."""
    repository: ReleaseRepositoryPort = MavenReleaseRepository(
        config.repository.repository_url,
        plugin_source=update_center.list_plugins,
        timeout=config.repository.timeout,
    )
    if config.repository.exclude_experimental:
        repository = ExperimentalFilter(repository)
    return repository


def create_orchestrator(config: AppConfig) -> VersionSyncOrchestrator:
    """Wire adapters and services for one run."""
    event_bus = EventBus()

    tracker = JiraVersionAdapter(config.tracker, dry_run=config.sync.dry_run)
    update_center = UpdateCenterClient(
        config.repository.update_center_url,
        timeout=config.repository.timeout,
    )
    reconciler = VersionReconciler(
        create_repository(config, update_center),
        update_center,
        event_bus=event_bus,
    )
    session_manager = SessionManager(tracker, CredentialsFile(config.tracker.credentials_path))
    retry_policy = RetryPolicy(
        max_attempts=config.sync.max_auth_retries,
        backoff=config.sync.retry_backoff,
    )

    return VersionSyncOrchestrator(
        tracker,
        reconciler,
        session_manager,
        project_key=config.tracker.project_key,
        retry_policy=retry_policy,
        dry_run=config.sync.dry_run,
        event_bus=event_bus,
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse arguments and run one synchronization.

    Usage errors exit with status 1 before any remote call. Errors raised
    by the synchronization itself propagate to the caller.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args, parser)

    setup_logging(config.sync.verbose)
    logger = logging.getLogger("main")

    if config.sync.max_auth_retries is None:
        logger.debug("Re-authentication is retried without limit")
    if config.sync.dry_run:
        logger.info("Running in DRY-RUN mode, no versions will be created")

    result: SyncResult = create_orchestrator(config).run()
    logger.debug(f"Run finished, {result.versions_created} versions processed")
    return ExitCode.SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
