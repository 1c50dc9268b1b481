"""Pytest fixtures for git-batch-branch tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from git_batch_branch.core import BranchManager
from git_batch_branch.models.branch import Branch
from git_batch_branch.services.git.provider import BranchProvider


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'repo_path': '.',
        'main_branch': None,
        'remote_name': 'origin',
        'interactive': False,
        'dry_run': False,
        'force': False,
        'case_sensitive': False,
        'verbose': False,
        'debug': False,
    }


def commit_file(repo: git.Repo, filename: str, content: str, message: str) -> None:
    """Write a file and commit it on the checked-out branch."""
    path = Path(repo.working_dir) / filename
    path.write_text(content)
    repo.index.add([filename])
    repo.index.commit(message)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with a merged, an unmerged and a second unmerged branch; main checked out."""
    repo = git_repo

    repo.git.checkout('-b', 'feature/merged')
    commit_file(repo, "merged.txt", "Merged content\n", "Feature to merge")
    repo.git.checkout('main')
    repo.git.merge('feature/merged', '--no-ff', '-m', 'Merge feature/merged')

    repo.git.checkout('-b', 'feature/unmerged')
    commit_file(repo, "unmerged.txt", "Unmerged content\n", "Unmerged work")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'bugfix/crash')
    commit_file(repo, "crash.txt", "Fix\n", "Fix crash")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def sample_branches():
    """Five branches: main (merged), current develop (unmerged), one merged feature, two plain."""
    return [
        Branch(name="main", is_main=True, is_merged=True,
               last_commit="a1b2c3d Initial commit", last_commit_date="2024-01-01 10:00:00 +0000"),
        Branch(name="develop", is_current=True, is_merged=False,
               last_commit="b2c3d4e Work in progress", last_commit_date="2024-01-02 10:00:00 +0000"),
        Branch(name="feature/login", is_merged=True,
               last_commit="c3d4e5f Add login", last_commit_date="2024-01-03 10:00:00 +0000"),
        Branch(name="bugfix/crash", is_merged=False,
               last_commit="d4e5f6a Fix crash", last_commit_date="2024-01-04 10:00:00 +0000"),
        Branch(name="Hotfix/Typo", is_merged=False,
               last_commit="e5f6a7b Fix typo", last_commit_date="2024-01-05 10:00:00 +0000"),
    ]


@pytest.fixture
def mock_provider(sample_branches):
    """Create a mock BranchProvider serving the sample branches."""
    provider = Mock(spec=BranchProvider)
    names = {b.name for b in sample_branches}

    provider.list_branches = Mock(return_value=list(sample_branches))
    provider.branch_exists = Mock(side_effect=lambda name: name in names)
    provider.delete_branch = Mock(return_value=True)
    provider.switch_branch = Mock(return_value=True)
    provider.has_uncommitted_changes = Mock(return_value=False)
    provider.is_branch_merged = Mock(return_value=False)
    provider.get_main_branch_name = Mock(return_value="main")
    provider.get_current_branch_name = Mock(return_value="develop")

    return provider


@pytest.fixture
def manager(mock_provider):
    """BranchManager initialized from the mock provider."""
    branch_manager = BranchManager(mock_provider)
    branch_manager.initialize()
    return branch_manager
