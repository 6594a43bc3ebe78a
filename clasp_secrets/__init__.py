"""clasp-secrets: keep clasp credentials in GitHub Actions secrets.

Uploads the local ``~/.clasprc.json`` to a repository's ``CLASPRC_JSON``
secret through the GitHub CLI, and recreates the file on CI runners.
"""

__version__ = "0.1.0"
