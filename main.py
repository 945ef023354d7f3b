#This file is for development purposes only

import logging
import sys

from jira_issue_client import get_client
from issue_tracker_interface import IssueTrackerError


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    client = get_client(interactive=True)
    user = sys.argv[1] if len(sys.argv) > 1 else input("Assignee to look up: ").strip()

    print(f"\nIssues assigned to {user}...")
    try:
        page = client.search_issues_by_assignee(user, max_results=5)
        for issue in page:
            print(f"- {issue} attachments={[a.filename for a in issue.attachments]}")
        if page.max_results > 0:
            pagination = page.pagination
            print(f"page {pagination.page} of {pagination.page_count} ({page.total} issues)")
    except IssueTrackerError as e:
        print(f"Error talking to Jira: {e}")

    print(f"\nRecent activity of {user}...")
    try:
        feed = client.user_activity(user)
        for entry in feed.entries[:5]:
            print(f"- {entry.updated} {entry.title}")
    except IssueTrackerError as e:
        print(f"Error reading activity stream: {e}")

if __name__ == "__main__":
    main()
