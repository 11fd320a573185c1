"""
Git history adapter for the contributor list generator.

Runs the author query against a repository checkout and returns its output
deduplicated and sorted, one ``name  -  email`` pair per line.
"""

import logging
import os
from typing import Optional, Tuple

# A missing git executable surfaces as GitCommandNotFound when the query runs
# instead of an ImportError while importing GitPython.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Repo  # noqa: E402
from git.exc import (  # noqa: E402
    GitCommandError,
    GitCommandNotFound,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from config.settings import settings  # noqa: E402
from services.author_list.errors import HistoryUnavailable  # noqa: E402
from shared.models import ENTRY_DELIMITER  # noqa: E402

logger = logging.getLogger(__name__)

HISTORY_FORMAT = f"%aN{ENTRY_DELIMITER}%aE"


def history_sort_key(line: str) -> Tuple[str, str]:
    """
    Order lines the way ``sort`` does under an English locale.

    Letter case is ignored first; on a tie, lowercase sorts before uppercase.
    """
    return (line.casefold(), line.swapcase())


def fetch_author_history(repo_path: Optional[str] = None) -> str:
    """
    Query every commit author recorded in the repository history.

    Equivalent to ``git log --format='%aN  -  %aE' | sort -u``: lines are
    unique and sorted case-insensitively. A repository without commits yields
    an empty string.

    Raises:
        HistoryUnavailable: git is missing, the path does not exist or is not
            a repository, or ``git log`` fails.
    """
    repo_path = repo_path or settings.git.repo_path

    try:
        repo = Repo(repo_path, search_parent_directories=True)
    except NoSuchPathError:
        raise HistoryUnavailable(repo_path, "path does not exist")
    except InvalidGitRepositoryError:
        raise HistoryUnavailable(repo_path, "not a Git repository")

    try:
        if not repo.head.is_valid():
            logger.info(f"Repository {repo.working_dir} has no commits yet")
            return ""
        output = repo.git.log(f"--format={HISTORY_FORMAT}")
    except GitCommandNotFound as e:
        raise HistoryUnavailable(repo_path, f"git executable not found: {e}")
    except GitCommandError as e:
        stderr = (e.stderr or "").strip()
        raise HistoryUnavailable(repo_path, f"git log failed: {stderr or e}")
    finally:
        repo.close()

    lines = sorted(set(output.splitlines()), key=history_sort_key)
    logger.debug(f"Read {len(lines)} distinct author lines from {repo_path}")
    return "\n".join(lines)
