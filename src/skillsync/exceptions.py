"""skill-sync exception hierarchy.

All public exceptions inherit from SkillSyncError, giving callers a single
base class to catch when they want to handle any skill-sync failure
without swallowing unrelated errors.

"Nothing there" conditions (a missing target, a skill directory that does
not exist) are never raised. They are reported as result fields instead.
"""


class SkillSyncError(Exception):
    """Base exception for all skill-sync errors."""


class InvalidInputError(SkillSyncError):
    """Raised when a caller passes an unusable argument.

    Covers unsafe skill names (empty, ``.``, ``..``, or containing a path
    separator) and a base directory that is missing or not a directory.
    Retrying without correcting the input will fail the same way.
    """


class SourceInvalidError(SkillSyncError):
    """Raised when the sync source is missing or not a directory.

    A sync that raises this has not touched any target.
    """


class SyncBusyError(SkillSyncError):
    """Raised when a sync is requested while another one is still running.

    The second request is rejected, not queued. Retrying once the running
    sync has finished is safe.
    """


class ConfigError(SkillSyncError):
    """Raised when the configuration file cannot be read or is malformed."""
