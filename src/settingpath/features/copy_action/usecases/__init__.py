"""Copy-setting-path use case."""

from .copy_setting_path import CopyOutcome, CopySettingPathAction

__all__ = ["CopyOutcome", "CopySettingPathAction"]
