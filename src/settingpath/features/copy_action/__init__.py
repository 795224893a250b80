# Path: `src/settingpath/features/copy_action/__init__.py`
# Summary: Export the copy action wiring resolver, clipboard and notifications.
# Why: Give the CLI and host glue one object to invoke.

from .usecases import CopyOutcome, CopySettingPathAction

__all__ = ["CopyOutcome", "CopySettingPathAction"]
