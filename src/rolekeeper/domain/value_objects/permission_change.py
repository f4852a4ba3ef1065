"""Single permission difference between committed and working sets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionChange:
    """Permission `id` goes from `before` to `after`."""

    id: str
    label: str
    before: bool
    after: bool

    @property
    def granted(self) -> bool:
        return self.after and not self.before
