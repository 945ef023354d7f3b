"""
Authentication
--------------
The client authenticates every request with HTTP basic auth and supports two credential modes:

1. When get_client(interactive = True)
    User is prompted at runtime for any of the required values missing from the environment.
2. When get_client(interactive = False) - Default
        JIRA_BASE_URL       https://myorg.atlassian.net
        JIRA_USER_EMAIL     me@example.com (or the login name on Jira Server)
        JIRA_API_TOKEN      <API token, or the password on Jira Server>
    Optional:
        JIRA_API_PATH       REST API prefix, defaults to /rest/api/2
        JIRA_ACTIVITY_PATH  Activity stream path, defaults to /activity

Dependencies:
    requests, feedparser
"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterator
from getpass import getpass
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from issue_tracker_interface.activity import ActivityFeed
from issue_tracker_interface.attachment import Attachment, base_filename, match_attachment
from issue_tracker_interface.client import IssueTrackerClient
from issue_tracker_interface.errors import (
    AttachmentAlreadyExistsError,
    AttachmentNotFoundError,
    AttachmentRemovalError,
    InvalidArgumentError,
    IssueTrackerError,
    NotFoundError,
    UploadFailedError,
    UserNotFoundError,
)
from issue_tracker_interface.errors import IssueNotFoundError as BaseIssueNotFoundError
from issue_tracker_interface.issue import IssueList
from issue_tracker_interface.user import User
from jira_issue_client.jira_activity import parse_activity_feed
from jira_issue_client.jira_issue import JiraIssue, get_issue as _make_issue

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

DEFAULT_API_PATH = "/rest/api/2"
DEFAULT_ACTIVITY_PATH = "/activity"
DOWNLOAD_CHUNK_SIZE = 64 * 1024

#inside a double quoted JQL string only the quote and the backslash need escaping
JQL_STRING_SPECIAL_CHARS = r'(["\\])'


class JiraError(IssueTrackerError):
    """Raised when the Jira API returns an unexpected response."""


class IssueNotFoundError(BaseIssueNotFoundError):
    """Raised when a requested Jira issue does not exist."""


def sanitize_input(value: str) -> str:
    return re.sub(JQL_STRING_SPECIAL_CHARS, r'\\\1', value)

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class JiraClient(IssueTrackerClient):
    """
    Args:
        base_url:      Jira instance root URL (e.g. 'https://myorg.atlassian.net')
        user_email:    Email (Cloud) or login name (Server) used for basic auth
        api_token:     API token (Cloud) or password (Server)
        api_path:      REST API prefix appended to base_url
        activity_path: Activity stream path appended to base_url
        session:       Transport to send requests through. A new requests.Session is
                       created when omitted; credentials are applied to it either way.
    """

    def __init__(
        self,
        base_url: str,
        user_email: str,
        api_token: str,
        *,
        api_path: str = DEFAULT_API_PATH,
        activity_path: str = DEFAULT_ACTIVITY_PATH,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_path = "/" + api_path.strip("/")
        self._activity_path = "/" + activity_path.strip("/")
        self._session = session if session is not None else requests.Session()
        self._session.auth = HTTPBasicAuth(user_email, api_token)
        #Content-Type stays per request so multipart uploads keep their boundary
        self._session.headers.update({"Accept": "application/json"})

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{self._api_path}{path}"

    def _get(self, path: str, params: dict | None = None, *, not_found: type[Exception] = IssueNotFoundError) -> Any:
        url = self._url(path)
        logger.debug("GET %s params=%s", url, params)
        response = self._session.get(url, params=params)
        self._raise_for_status(response, not_found=not_found)
        return response.json()

    def _delete(self, path: str) -> requests.Response:
        url = self._url(path)
        logger.debug("DELETE %s", url)
        return self._session.delete(url)

    def _upload(self, path: str, local_path: str | os.PathLike, filename: str) -> requests.Response:
        url = self._url(path)
        logger.debug("POST %s file=%s", url, filename)
        with open(local_path, "rb") as handle:
            #Jira rejects attachment uploads without this XSRF opt-out header
            return self._session.post(
                url,
                files={"file": (filename, handle)},
                headers={"X-Atlassian-Token": "no-check"},
            )

    @staticmethod
    def _raise_for_status(response: requests.Response, not_found: type[Exception] = IssueNotFoundError) -> None:
        if response.status_code == 404:
            raise not_found(f"Resource not found: {response.url}")
        if not response.ok:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            raise JiraError(f"Jira API error {response.status_code}: {detail}")

    def _build_issue(self, issue: dict) -> JiraIssue:
        return _make_issue(issue)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    def get_issue(self, issue_id: str) -> JiraIssue:
        """Fetch a single Jira issue by id or key."""
        #_get returns the decoded JSON, _build_issue wraps it in a JiraIssue
        data = self._get(f"/issue/{issue_id}")
        return self._build_issue(data)

    def search_issues_by_assignee(self, user: str, max_results: int = 50, start_at: int = 0) -> IssueList:
        """Return one page of issues assigned to user.

        total, startAt and maxResults are taken from the response as is; Jira may cap
        maxResults below what was asked for.
        """
        params = {
            "jql": f'assignee = "{sanitize_input(user)}"',
            "startAt": start_at,
            "maxResults": max_results,
        }
        data = self._get("/search", params=params)
        return IssueList(
            issues=[self._build_issue(issue) for issue in data.get("issues", [])],
            total=data.get("total", 0),
            start_at=data.get("startAt", start_at),
            max_results=data.get("maxResults", max_results),
        )

    def iter_issues_by_assignee(self, user: str, page_size: int = 50) -> Iterator[JiraIssue]:
        """Yield every issue assigned to user, one search request per page."""
        if page_size <= 0:
            raise InvalidArgumentError(f"page_size must be positive, got {page_size}")

        start_at = 0
        #stop once the reported total is reached or Jira hands back an empty page
        while True:
            page = self.search_issues_by_assignee(user, max_results=page_size, start_at=start_at)
            if not page.issues:
                return
            yield from page.issues
            start_at += len(page.issues)
            if start_at >= page.total:
                return

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def _find_attachment(self, issue_key: str, filename: str | os.PathLike) -> Attachment | None:
        issue = self.get_issue(issue_key)
        return match_attachment(issue.attachments, filename)

    def find_attachment(self, issue_key: str, filename: str | os.PathLike) -> str:
        """Return the id of the first attachment on issue_key named like filename (case-insensitive)."""
        attachment = self._find_attachment(issue_key, filename)
        if attachment is None:
            raise AttachmentNotFoundError(f"Attachment {base_filename(filename)} has not been found on {issue_key}")
        return attachment.id

    def add_attachment(self, issue_key: str, path: str | os.PathLike) -> None:
        """
        Notes on usage:
            The file is stored under its base name. Jira answers a successful upload with
            200, anything else is reported as UploadFailedError.

        Raises:
            FileNotFoundError:            If path is not a file
            IssueNotFoundError:           If the issue does not exist
            AttachmentAlreadyExistsError: If an attachment with the same base name exists
            UploadFailedError:            If Jira did not answer 200
        """
        _require_file(path)
        filename = base_filename(path)

        if self.has_attachment(issue_key, filename):
            raise AttachmentAlreadyExistsError(f"Jira issue {issue_key} already has attachment {filename}")

        response = self._upload(f"/issue/{issue_key}/attachments", path, filename)
        if response.status_code != 200:
            raise UploadFailedError(response.status_code)
        logger.info("Attached %s to %s", filename, issue_key)

    def update_attachment(self, issue_key: str, path: str | os.PathLike) -> None:
        """
        Notes on usage:
            Replace works as delete then add, Jira has no in-place replace for attachments.
            If the upload fails after the old attachment was removed, the issue is left
            without any attachment of that name; the upload error is raised as is.

        Raises:
            FileNotFoundError:      If path is not a file (checked before anything is deleted)
            AttachmentRemovalError: If Jira refused to delete the existing attachment
        """
        _require_file(path)

        existing = self._find_attachment(issue_key, path)
        if existing is not None:
            response = self._remove(existing.id)
            if response.status_code != 204:
                raise AttachmentRemovalError(existing.id, response.status_code)

        self.add_attachment(issue_key, path)

    def remove_attachment(self, attachment_id: str) -> bool:
        """Delete an attachment. Jira confirms a deletion with 204, any other status means it was not removed."""
        return self._remove(attachment_id).status_code == 204

    def _remove(self, attachment_id: str) -> requests.Response:
        response = self._delete(f"/attachment/{attachment_id}")
        if response.status_code == 204:
            logger.info("Removed attachment %s", attachment_id)
        else:
            logger.warning("Attachment %s was not removed, status code %s", attachment_id, response.status_code)
        return response

    def download_attachment(
        self,
        issue_id: str,
        filename: str,
        directory: str | os.PathLike | None = None,
    ) -> str:
        """Stream an attachment to <directory>/<filename> and return the absolute path.

        An existing local file of that name is overwritten. The local file is not touched
        if Jira answers with an error, and a partially written file is removed when the
        transfer breaks off.
        """
        attachment = self._find_attachment(issue_id, filename)
        if attachment is None:
            raise AttachmentNotFoundError(f"Attachment {base_filename(filename)} has not been found on {issue_id}")

        target = os.path.abspath(os.path.join(directory or os.getcwd(), base_filename(filename)))
        logger.info("Downloading %s to %s", attachment.content_url, target)

        response = self._session.get(attachment.content_url, stream=True, headers={"Accept": "*/*"})
        try:
            self._raise_for_status(response, not_found=AttachmentNotFoundError)
            written = 0
            try:
                with open(target, "wb") as output:
                    for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            output.write(chunk)
                            written += len(chunk)
            except Exception:
                with contextlib.suppress(FileNotFoundError):
                    os.remove(target)
                raise
        finally:
            response.close()

        logger.info("%d bytes downloaded.", written)
        return target

    # ------------------------------------------------------------------
    # Users and activity
    # ------------------------------------------------------------------

    def get_user(self, username: str) -> User:
        """Look a user up by login name."""
        data = self._get("/user", params={"username": username}, not_found=UserNotFoundError)
        user = User.from_dict(data)
        if user is None:
            raise UserNotFoundError(f"User {username} has not been found")
        return user

    def user_activity(self, user: str) -> ActivityFeed:
        url = f"{self._base_url}{self._activity_path}"
        return self._fetch_feed(url, params={"streams": f"user IS {user}"})

    def activity(self, url: str) -> ActivityFeed:
        return self._fetch_feed(url)

    def _fetch_feed(self, url: str, params: dict | None = None) -> ActivityFeed:
        logger.debug("GET %s params=%s", url, params)
        response = self._session.get(url, params=params, headers={"Accept": "application/atom+xml"})
        self._raise_for_status(response, not_found=NotFoundError)
        return parse_activity_feed(response.content)


def _require_file(path: str | os.PathLike) -> None:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No such file: {os.fspath(path)}")


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False) -> JiraClient:
    """Return a configured JiraClient.

    Reads credentials from environment variables. If "interactive = True" and
    any required variable is missing, the user will be prompted.

    Environment variables:
        JIRA_BASE_URL:      Base URL of the Jira instance.
        JIRA_USER_EMAIL:    Account email or login name.
        JIRA_API_TOKEN:     API token or password.
        JIRA_API_PATH:      Optional REST API prefix (default /rest/api/2).
        JIRA_ACTIVITY_PATH: Optional activity stream path (default /activity).
    """
    base_url = os.environ.get("JIRA_BASE_URL", "")
    user_email = os.environ.get("JIRA_USER_EMAIL", "")
    api_token = os.environ.get("JIRA_API_TOKEN", "")

    if interactive:
        if not base_url:
            base_url = input("Jira base URL (e.g. https://myorg.atlassian.net): ").strip()
        if not user_email:
            user_email = input("Jira user email: ").strip()
        if not api_token:
            api_token = getpass("Jira API token: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("JIRA_BASE_URL", base_url),
            ("JIRA_USER_EMAIL", user_email),
            ("JIRA_API_TOKEN", api_token),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    return JiraClient(
        base_url,
        user_email,
        api_token,
        api_path=os.environ.get("JIRA_API_PATH") or DEFAULT_API_PATH,
        activity_path=os.environ.get("JIRA_ACTIVITY_PATH") or DEFAULT_ACTIVITY_PATH,
    )
