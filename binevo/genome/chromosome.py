from __future__ import annotations

from typing import Iterable

import numpy as np

from binevo.exceptions import ChromosomeLengthError, OperatorError

__all__ = ["Chromosome", "MAX_CHROMOSOME_LENGTH"]

# Chromosomes decode through a 64-bit unsigned integer.
MAX_CHROMOSOME_LENGTH = 64


class Chromosome:
    """Immutable fixed-length bit string, most significant bit first.

    Bits live in a read-only numpy ``bool`` array. Every edit (``flip``,
    crossover splices) builds a new ``Chromosome`` so an owner can detect
    the change by reassignment.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[bool] | np.ndarray):
        if not isinstance(bits, np.ndarray):
            bits = list(bits)
        arr = np.array(bits, dtype=bool).reshape(-1)
        arr.flags.writeable = False
        self._bits = arr

    @classmethod
    def zeros(cls, length: int) -> Chromosome:
        return cls(np.zeros(length, dtype=bool))

    @classmethod
    def random(cls, length: int, rng: np.random.Generator) -> Chromosome:
        """Draw ``length`` fair bits from *rng*."""
        return cls(rng.integers(0, 2, size=length).astype(bool))

    @classmethod
    def from_string(cls, text: str) -> Chromosome:
        """Parse a string such as ``"1011"``."""
        text = text.strip()
        if any(ch not in "01" for ch in text):
            raise OperatorError(f"Invalid bit string: {text!r}")
        return cls([ch == "1" for ch in text])

    @property
    def bits(self) -> np.ndarray:
        return self._bits

    def __len__(self) -> int:
        return int(self._bits.size)

    def __getitem__(self, index: int) -> bool:
        return bool(self._bits[index])

    def __iter__(self):
        return (bool(b) for b in self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self._bits, other._bits)

    def __hash__(self) -> int:
        return hash(self._bits.tobytes())

    def __str__(self) -> str:
        return "".join("1" if b else "0" for b in self._bits)

    def __repr__(self) -> str:
        return f"Chromosome('{self}')"

    def to_int(self) -> int:
        """Unsigned integer value, first bit most significant."""
        value = 0
        for bit in self._bits:
            value = (value << 1) | int(bit)
        return value

    def decode(self, min_value: float, max_value: float) -> float:
        """Map the bit string linearly onto ``[min_value, max_value]``.

        All zeros decode to exactly ``min_value``; all ones to ``max_value``
        up to float rounding. Resolution is ``(max - min) / (2**L - 1)``.
        """
        length = len(self)
        if length == 0:
            return min_value
        int_max = (1 << length) - 1
        return min_value + (self.to_int() / int_max) * (max_value - min_value)

    def hamming_distance(self, other: Chromosome) -> int:
        if len(self) != len(other):
            raise ChromosomeLengthError(
                f"Cannot compare chromosomes of length {len(self)} and {len(other)}"
            )
        return int(np.count_nonzero(self._bits != other._bits))

    def flip(self, mask: Iterable[bool] | np.ndarray) -> Chromosome:
        """Return a copy with every bit where *mask* is true inverted."""
        mask_arr = np.asarray(mask, dtype=bool)
        if mask_arr.shape != self._bits.shape:
            raise ChromosomeLengthError(
                f"Flip mask length {mask_arr.size} does not match chromosome length {len(self)}"
            )
        return Chromosome(self._bits ^ mask_arr)
