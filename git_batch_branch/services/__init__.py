"""Services for git-batch-branch."""
