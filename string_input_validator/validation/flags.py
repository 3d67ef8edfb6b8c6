"""Validation flag set.

ValidationFlag is an ``enum.Flag`` so that several validators can report
multiple reasons at once. A value of the type is a set of flags; the zero
value is the empty set.

When you add a flag, give it the next free bit and an entry in
``_DISPLAY_NAMES`` so that rendering stays complete.
"""

from enum import Flag


class ValidationFlag(Flag):
    """Immutable set of validation flags with ordered rendering."""

    INVALID_FORMAT = 1 << 0
    LENGTH_EXCEEDED = 1 << 1
    EMPTY_STRING = 1 << 2
    LENGTH_MISMATCH = 1 << 3

    @classmethod
    def none(cls) -> "ValidationFlag":
        """Return the empty flag set."""
        return cls(0)

    @classmethod
    def of(cls, *flags: "ValidationFlag") -> "ValidationFlag":
        """Build a flag set from zero or more flags."""
        result = cls(0)
        for flag in flags:
            result |= flag
        return result

    def merge(self, other: "ValidationFlag") -> "ValidationFlag":
        """Return the union of both flag sets."""
        return self | other

    def contains(self, flag: "ValidationFlag") -> bool:
        """Check whether every flag of ``flag`` is present."""
        return (self & flag) == flag

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    def members(self) -> list["ValidationFlag"]:
        """Single flags present in this set, in ascending bit order."""
        return sorted(
            (flag for flag in type(self) if flag.value & self.value),
            key=lambda flag: flag.value,
        )

    def render(self) -> str:
        """Render as ``[Name, Name]`` in ascending bit order; ``[]`` if empty."""
        names = ", ".join(_DISPLAY_NAMES[flag.name] for flag in self.members())
        return f"[{names}]"

    def __str__(self) -> str:
        return self.render()


_DISPLAY_NAMES = {
    "INVALID_FORMAT": "InvalidFormat",
    "LENGTH_EXCEEDED": "LengthExceeded",
    "EMPTY_STRING": "EmptyString",
    "LENGTH_MISMATCH": "LengthMismatch",
}
