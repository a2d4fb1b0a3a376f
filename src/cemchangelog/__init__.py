"""cem-changelog - classified changelogs between custom elements manifests."""

__version__ = "0.1.0"

from cemchangelog.config.models import ChangelogConfig  # noqa: E402
from cemchangelog.core.errors import CemChangelogError, InvalidInputError  # noqa: E402
from cemchangelog.diff.models import ChangelogResult, ChangeRecord, ChangeType  # noqa: E402
from cemchangelog.diff.ops import CemChangelog, compare_manifests  # noqa: E402

__all__ = [
    "__version__",
    "CemChangelog",
    "CemChangelogError",
    "ChangeRecord",
    "ChangeType",
    "ChangelogConfig",
    "ChangelogResult",
    "InvalidInputError",
    "compare_manifests",
]
