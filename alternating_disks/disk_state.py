"""
Disk state data structures.

A row of light and dark disks that the sorting algorithms rearrange with
adjacent swaps, and the result bundle they hand back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List


class DiskColor(Enum):
    """Disk colors, valued by their one-letter rendering"""
    LIGHT = "L"
    DARK = "D"


class DiskRow:
    """
    Fixed-length row of disks.

    A freshly constructed row holds ``2 * light_count`` disks alternating
    LIGHT, DARK, LIGHT, DARK, ... starting with LIGHT. The length is always
    even and never changes after construction.
    """

    def __init__(self, light_count: int = 0):
        if not isinstance(light_count, int) or isinstance(light_count, bool):
            raise ValueError(f"light_count must be an int, got {light_count!r}")
        if light_count < 0:
            raise ValueError(f"light_count must be non-negative, got {light_count}")

        self._colors: List[DiskColor] = [
            DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            for i in range(light_count * 2)
        ]
        self._read_only = False

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor]) -> "DiskRow":
        """
        Build a row holding an arbitrary arrangement of disks.

        Args:
            colors: Disk colors from left to right

        Returns:
            New DiskRow

        Raises:
            TypeError: If an item is not a DiskColor
            ValueError: If the number of disks is odd
        """
        colors = list(colors)
        for color in colors:
            if not isinstance(color, DiskColor):
                raise TypeError(f"Expected DiskColor, got {color!r}")
        if len(colors) % 2 != 0:
            raise ValueError(f"A disk row needs an even number of disks, got {len(colors)}")

        row = cls(0)
        row._colors = colors
        return row

    @classmethod
    def from_string(cls, text: str) -> "DiskRow":
        """
        Parse a rendered row such as ``"L D L D"``.

        Whitespace is optional and symbols are case-insensitive.
        """
        colors = []
        for char in "".join(text.split()):
            try:
                colors.append(DiskColor(char.upper()))
            except ValueError:
                raise ValueError(f"Unknown disk symbol: {char!r}")
        return cls.from_colors(colors)

    def total_count(self) -> int:
        return len(self._colors)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        """Color of the disk at ``index``."""
        if not self.is_index(index):
            raise IndexError(f"Disk index {index} out of range for row of {self.total_count()}")
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at ``left_index`` and ``left_index + 1``."""
        if self._read_only:
            raise TypeError("Cannot swap disks in a read-only row")
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise IndexError(
                f"Cannot swap ({left_index}, {right_index}) in row of {self.total_count()}"
            )
        self._colors[left_index], self._colors[right_index] = (
            self._colors[right_index], self._colors[left_index]
        )

    def count(self, color: DiskColor) -> int:
        return self._colors.count(color)

    def is_initialized(self) -> bool:
        """True when the row alternates LIGHT, DARK, ... starting with LIGHT."""
        for i, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            if color != expected:
                return False
        return True

    def is_sorted(self) -> bool:
        """True when every light disk is left of every dark disk."""
        k = self.light_count()
        return (
            all(color == DiskColor.LIGHT for color in self._colors[:k])
            and all(color == DiskColor.DARK for color in self._colors[k:])
        )

    def make_read_only(self) -> None:
        """Reject any further swaps on this row."""
        self._read_only = True

    def is_read_only(self) -> bool:
        return self._read_only

    def copy(self) -> "DiskRow":
        """Writable copy of this row."""
        return DiskRow.from_colors(self._colors)

    def to_string(self) -> str:
        return " ".join(color.value for color in self._colors)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(self._colors)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DiskRow({self.to_string()!r})"


@dataclass(frozen=True)
class SortResult:
    """
    Outcome of one sort invocation.

    Attributes:
        after: Final arrangement, a read-only copy owned by this result
        swap_count: Number of adjacent swaps performed
        algorithm: Name of the algorithm that produced it
        passes: Sweeps (alternate) or outer iterations (lawnmower) executed
    """
    after: DiskRow
    swap_count: int
    algorithm: str = ""
    passes: int = 0

    def __post_init__(self):
        if self.swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {self.swap_count}")
        after = self.after.copy()
        after.make_read_only()
        object.__setattr__(self, "after", after)
