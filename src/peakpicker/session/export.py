import operator
from dataclasses import dataclass, field
from typing import Any

from peakpicker.types import Index


@dataclass(frozen=True)
class PeakExport:
    """Finalized peaks' indices of a picking session."""
    indices: tuple[Index, ...]
    name: str = field(default='df')

    def __post_init__(self) -> None:
        object.__setattr__(self, 'indices', tuple(sorted(set(operator.index(i) for i in self.indices))))

    @property
    def n_peaks(self) -> int:
        return len(self.indices)

    def to_code(self, name: str | None = None) -> str:
        """Get a line of code to reproduce the annotation without a picking session.

        Example:
            df = add_peaks(df, [108, 451, 770])
        """
        name = name or self.name

        content = ', '.join(map(str, self.indices))
        return f'{name} = add_peaks({name}, [{content}])'

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'indices': list(self.indices),
        }

    def __str__(self) -> str:
        return self.to_code()
