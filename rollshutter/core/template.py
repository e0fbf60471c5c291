"""File mask parsing and frame path rendering."""

import re
from dataclasses import dataclass

from .errors import MalformedTemplateError

_PLACEHOLDER = re.compile(r"%(0)?(\d+)d")


@dataclass(frozen=True)
class FrameTemplate:
    """A file mask with exactly one integer placeholder.

    ``frames/%03d.png`` renders index 7 as ``frames/007.png``. Without the
    leading zero (``%3d``) indices are rendered unpadded; the digit count still
    bounds the largest index the mask can address.
    """
    prefix: str
    digits: int
    zero_padded: bool
    suffix: str

    @classmethod
    def parse(cls, mask: str) -> "FrameTemplate":
        matches = list(_PLACEHOLDER.finditer(mask))
        if not matches:
            raise MalformedTemplateError(mask, "no sequential placeholder such as %03d")
        if len(matches) > 1:
            raise MalformedTemplateError(mask, "only one sequential placeholder is allowed")

        m = matches[0]
        digits = int(m.group(2))
        if digits == 0:
            raise MalformedTemplateError(mask, "placeholder width must be at least 1")
        return cls(
            prefix=mask[:m.start()],
            digits=digits,
            zero_padded=m.group(1) is not None,
            suffix=mask[m.end():],
        )

    @property
    def capacity(self) -> int:
        """Number of indices addressable by the placeholder width."""
        return 10 ** self.digits

    def fits(self, index: int) -> bool:
        return 0 <= index < self.capacity

    def render(self, index: int) -> str:
        if index < 0:
            raise ValueError(f"Frame index must be non-negative, got {index}")
        number = f"{index:0{self.digits}d}" if self.zero_padded else str(index)
        return f"{self.prefix}{number}{self.suffix}"

    def __str__(self) -> str:
        zero = "0" if self.zero_padded else ""
        return f"{self.prefix}%{zero}{self.digits}d{self.suffix}"
