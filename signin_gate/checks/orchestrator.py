# AGPL-3.0 License

"""
Rule engine: runs every sign-in check in a fixed order and builds the report.
"""

from signin_gate.algo.types import ChangeRecord
from signin_gate.checks.check_result import Errors, ReportSummary, ValidationReport
from signin_gate.checks.naming import FolderClaim, check_folder_name, is_valid_date, is_valid_identifier
from signin_gate.checks.path_classifier import check_path_structure, claimed_folders, filenames_in_folder
from signin_gate.checks.scope import check_containment, check_scope_and_mutation, check_single_folder
from signin_gate.checks.size import check_file_sizes
from signin_gate.checks.whitelist import check_filenames
from signin_gate.git_providers.git_provider import GitProvider
from signin_gate.log import get_logger


class EmptyChangeSet(Exception):
    """The pull request reports no changed files."""


class RuleEngine:
    """
    Evaluates one pull request.

    Every step runs, whatever earlier steps found, and appends to the same
    error tuple, so the report lists every problem at once. Messages keep
    step order: scope, structure, single folder, name, containment,
    whitelist, size.
    """

    def __init__(self, git_provider: GitProvider):
        self.git_provider = git_provider
        self.logger = get_logger()

    async def run(self, pr_number: int) -> ValidationReport:
        """
        Fetch the pull request's changes and evaluate them.

        Raises:
            HostUnavailable: the change list could not be fetched
            EmptyChangeSet: the pull request has no changed files
        """
        records = await self.git_provider.get_pr_files(pr_number)
        if not records:
            raise EmptyChangeSet("No changed files were detected in the pull request.")
        return await self.evaluate(records)

    async def evaluate(self, records: list[ChangeRecord]) -> ValidationReport:
        records = tuple(records)
        errors: Errors = ()

        errors = self._step("scope", errors, check_scope_and_mutation(records, errors))
        errors = self._step("structure", errors, check_path_structure(records, errors))

        folders = claimed_folders(records)
        errors = self._step("single folder", errors, check_single_folder(folders, errors))
        # Later steps still need a folder when the rule above is broken.
        folder = folders[0] if folders else ""

        claim = FolderClaim.from_name(folder)
        errors = self._step("folder name", errors, check_folder_name(claim, errors))
        errors = self._step("containment", errors, check_containment(records, folder, errors))

        state, whitelisted = check_filenames(filenames_in_folder(records, folder), folder, errors)
        errors = self._step("whitelist", errors, whitelisted)

        errors = self._step("size", errors, await check_file_sizes(records, self.git_provider, errors))

        report = ValidationReport(
            summary=ReportSummary(
                folder=folder,
                date_part=claim.date_part,
                identifier_part=claim.identifier_part,
                date_valid=is_valid_date(claim.date_part),
                identifier_valid=is_valid_identifier(claim.identifier_part),
                file_count=len(records),
                has_required_file=state.has_required_file,
                png_count=state.count("png"),
                css_count=state.count("css"),
            ),
            errors=errors,
        )
        self.logger.info(f"Evaluation completed: {report}")
        return report

    def _step(self, name: str, before: Errors, after: Errors) -> Errors:
        new_errors = after[len(before):]
        for message in new_errors:
            self.logger.error(f"❌ {message}")
        self.logger.debug(f"Step '{name}' recorded {len(new_errors)} violation(s)")
        return after
