from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ComplexNum(Generic[T]):
    """Complex value over any field supporting +, - and *."""

    re: T
    im: T

    def squared(self) -> ComplexNum[T]:
        cross = self.re * self.im
        return ComplexNum(self.re * self.re - self.im * self.im, cross + cross)

    def add(self, other: ComplexNum[T]) -> ComplexNum[T]:
        return ComplexNum(self.re + other.re, self.im + other.im)

    def norm_sqr(self) -> T:
        return self.re * self.re + self.im * self.im
