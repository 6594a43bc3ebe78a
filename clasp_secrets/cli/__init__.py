"""CLI commands for clasp-secrets.

The CLI is built using Click; the entry point ``clasp-secrets`` lives in
clasp_secrets.main and registers the commands below.

Key Commands:
    check / upload / delete (clasp_secrets.cli.secrets):
        Repository access check and CLASPRC_JSON secret management via gh.

    export / restore (clasp_secrets.cli.export):
        Write ~/.clasprc.json on CI from CLASP_* variables or the
        base64 CLASPRC_JSON secret.

Usage Examples:
    Upload local credentials::

        $ clasp-secrets upload octocat/my-apps-script

    Recreate them on a runner::

        $ clasp-secrets restore --from-env CLASPRC_JSON
"""

from clasp_secrets.cli.export import export_command, restore_command
from clasp_secrets.cli.secrets import check_command, delete_command, upload_command

__all__ = [
    "check_command",
    "upload_command",
    "delete_command",
    "export_command",
    "restore_command",
]
