# AGPL-3.0 License

"""
PR sign-in check tool - evaluates a pull request and reports the verdict.

The verdict decides the exit code. Posting the comment is best effort and
never changes it.
"""

from typing import Optional

from signin_gate.checks.check_result import ValidationReport
from signin_gate.checks.orchestrator import EmptyChangeSet, RuleEngine
from signin_gate.checks.policy import MAX_FILE_SIZE_LABEL
from signin_gate.config_loader import get_settings
from signin_gate.git_providers.event_context import PullRequestEvent
from signin_gate.git_providers.git_provider import GitProvider, HostUnavailable
from signin_gate.log import get_logger
from signin_gate.tools.report_renderer import render_comment

EXIT_PASSED = 0
EXIT_FAILED = 1


class PRSignInCheck:
    """
    Runs the rule engine for one pull request and reports the result.
    """

    def __init__(
        self,
        event: PullRequestEvent,
        git_provider: GitProvider,
        publish_output: Optional[bool] = None,
    ):
        """
        Args:
            event: Trigger context of the run
            git_provider: Host capabilities (listing, blob sizes, comments)
            publish_output: Override ``config.publish_output``
        """
        self.event = event
        self.git_provider = git_provider
        if publish_output is None:
            publish_output = get_settings().config.publish_output
        self.publish_output = publish_output
        self.logger = get_logger()

    async def run(self) -> int:
        """Evaluate the pull request and return the process exit code."""
        self.logger.info(f"Running sign-in check on PR #{self.event.number} ({self.event.base_full_name})")
        engine = RuleEngine(self.git_provider)

        try:
            report = await engine.run(self.event.number)
        except (HostUnavailable, EmptyChangeSet) as e:
            self.logger.error(f"❌ {e}")
            return EXIT_FAILED

        if report.passed:
            self.logger.info(
                f"✅ Check passed: only added folder {report.summary.folder}, "
                f"named correctly, allowed files only, all ≤ {MAX_FILE_SIZE_LABEL} 🎉"
            )

        await self._publish_report(report)

        if not report.passed:
            self.logger.error(f"❌ Validation failed with {len(report.errors)} error(s)")
            return EXIT_FAILED
        return EXIT_PASSED

    async def _publish_report(self, report: ValidationReport) -> None:
        """Post the report comment; failures are logged and swallowed."""
        if not self.publish_output:
            self.logger.info("Publishing is disabled, skipping PR comment")
            return

        comment_events = list(get_settings().get("github", {}).get("comment_events", ["pull_request"]))
        if self.event.event_name not in comment_events:
            self.logger.info(f"ℹ️ Not a pull request event ({self.event.event_name or 'unknown'}), skipping PR comment")
            return

        try:
            comment = render_comment(report)
            await self.git_provider.publish_comment(self.event.number, comment)
            self.logger.info(f"✅ Commented on PR #{self.event.number}")
        except Exception as e:
            self.logger.error(f"❌ Failed to publish comment: {e}")
            self.logger.error("Hint: make sure GITHUB_TOKEN has the 'pull-requests: write' permission")
