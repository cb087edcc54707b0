"""Version information describing the state of the source checkout."""

from __future__ import annotations

from dataclasses import dataclass

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Version:
    """Revision, modification flag, tag and branch of a build."""

    revision: str = NOT_AVAILABLE
    dirty: str = ""
    tag: str = NOT_AVAILABLE
    branch: str = NOT_AVAILABLE

    def git_version(self) -> str:
        """Human-readable summary such as 'v1.0+ on branch main'."""
        if self.revision == NOT_AVAILABLE:
            return NOT_AVAILABLE
        name = self.tag if self.tag != "" else self.revision
        return f"{name}{self.dirty} on branch {self.branch}"