"""Selectable options presented to the operator."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CleanOption:
    """A single row of the removal checklist."""

    label: str
    value: str  # Worktree display name, used as the selection key
    selected: bool = False


@dataclass
class CleanOptions:
    """Ordered checklist rows plus the header aligned with them."""

    options: List[CleanOption] = field(default_factory=list)
    column_header: str = ""

    def __len__(self) -> int:
        return len(self.options)

    @property
    def preselected(self) -> List[str]:
        return [option.value for option in self.options if option.selected]
