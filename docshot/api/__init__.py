"""Command API: each ``cmd_*`` function returns a StageResult."""
