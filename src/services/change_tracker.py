"""Coordinates webhook events, content fetching and documentation dispatch."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from src.exceptions import ConfigurationError
from src.models import collect_pr_changes, collect_push_changes
from src.protocols.github_client_protocol import GitHubClientProtocol
from src.schemas import ChangeEntry, CommitRecord, DispatchOutcome, DocumentationRequest

from .content_fetcher import fetch_all_contents
from .dispatcher import DocumentationDispatcher

logger = logging.getLogger(__name__)

PULL_REQUEST_ACTIONS = frozenset({"opened", "synchronize", "reopened"})
ISSUE_WELCOME_COMMENT = "Thanks for opening this issue!"
BRANCH_REF_PREFIX = "refs/heads/"


class ChangeTracker:
    """Turns GitHub webhook deliveries into documentation requests."""

    def __init__(self, github: GitHubClientProtocol, dispatcher: DocumentationDispatcher):
        self.github = github
        self.dispatcher = dispatcher

    async def __aenter__(self) -> "ChangeTracker":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.github.aclose()
        await self.dispatcher.aclose()

    @staticmethod
    def handles(event: str, payload: Dict[str, Any]) -> bool:
        """Whether an event/action pair is one the tracker reacts to."""
        action = payload.get("action")
        if event == "push":
            return True
        if event == "pull_request":
            return action in PULL_REQUEST_ACTIONS
        if event == "issues":
            return action == "opened"
        return False

    async def handle_event(
        self, event: str, payload: Dict[str, Any]
    ) -> Optional[DispatchOutcome]:
        """Process one delivery. Errors are logged and never raised."""
        try:
            if event == "push":
                return await self.handle_push(payload)
            if event == "pull_request":
                return await self.handle_pull_request(payload)
            if event == "issues":
                await self.handle_issue_opened(payload)
                return None
            logger.debug(f"Ignoring unsupported event: {event}")
            return None
        except Exception as e:
            repository = payload.get("repository") or {}
            name = repository.get("full_name", "unknown") if isinstance(repository, dict) else "unknown"
            logger.error(f"Error processing {event} event for {name}: {e}")
            return None

    async def handle_push(self, payload: Dict[str, Any]) -> Optional[DispatchOutcome]:
        owner, repo = _repository(payload)
        ref = payload.get("ref") or ""
        branch = ref[len(BRANCH_REF_PREFIX):] if ref.startswith(BRANCH_REF_PREFIX) else ref
        commits = [CommitRecord.model_validate(c) for c in payload.get("commits") or []]

        logger.info(f"Push detected in {owner}/{repo} on branch {branch}")
        logger.info(f"Number of commits: {len(commits)}")
        for commit in commits:
            logger.debug(
                f"Commit {commit.id}: added={len(commit.added)} "
                f"modified={len(commit.modified)} removed={len(commit.removed)}"
            )

        changes = collect_push_changes(commits)
        logger.info(f"Total unique changed files: {len(changes)}")
        if not changes:
            logger.warning(
                "No changed files detected in this push. "
                "This might be a merge commit or a push without file changes."
            )
            return None

        return await self.process_changes(owner, repo, branch, changes)

    async def handle_pull_request(
        self, payload: Dict[str, Any]
    ) -> Optional[DispatchOutcome]:
        owner, repo = _repository(payload)
        pull_request = payload["pull_request"]
        pr_number = pull_request["number"]
        head = pull_request.get("head") or {}
        branch = head.get("ref")

        logger.info(f"Pull request #{pr_number} activity detected in {owner}/{repo}")

        statuses = await self.github.list_pull_request_files(owner, repo, pr_number)
        changes = collect_pr_changes(statuses)
        if not changes:
            logger.warning(f"Pull request #{pr_number} has no changed files")
            return None

        # The head sha is readable from the base repository, fork branches are not
        return await self.process_changes(
            owner,
            repo,
            branch,
            changes,
            pr_number=pr_number,
            ref=head.get("sha") or branch,
        )

    async def handle_issue_opened(self, payload: Dict[str, Any]) -> None:
        owner, repo = _repository(payload)
        issue_number = payload["issue"]["number"]
        await self.github.create_comment(owner, repo, issue_number, ISSUE_WELCOME_COMMENT)
        logger.info(f"Welcomed issue #{issue_number} in {owner}/{repo}")

    async def process_changes(
        self,
        owner: str,
        repo: str,
        branch: Optional[str],
        changes: List[ChangeEntry],
        pr_number: Optional[int] = None,
        ref: Optional[str] = None,
    ) -> Optional[DispatchOutcome]:
        """Fetch contents for `changes` and dispatch them; None when not configured."""
        logger.info(f"Processing {len(changes)} changed files")
        files = await fetch_all_contents(self.github, changes, owner, repo, ref or branch)

        request = DocumentationRequest(
            owner=owner,
            repo=repo,
            branch=branch or None,
            pr_number=pr_number,
            files=files,
        )
        try:
            outcome = await self.dispatcher.dispatch(request)
        except ConfigurationError as e:
            logger.error(f"Skipping documentation update for {owner}/{repo}: {e}")
            if pr_number is not None:
                await self.dispatcher.notify(
                    request, DispatchOutcome.failed(str(e), [entry.path for entry in files])
                )
            return None

        logger.info(
            f"Documentation dispatch for {owner}/{repo} finished: {outcome.status.value}"
        )
        return outcome


def _repository(payload: Dict[str, Any]) -> Tuple[str, str]:
    repository = payload["repository"]
    owner = repository.get("owner") or {}
    return owner.get("login") or owner.get("name") or "", repository["name"]
