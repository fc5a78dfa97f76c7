"""Core response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ResponseHead:
    """The non-body part of an HTTP response."""

    status: int

    @classmethod
    def of(cls, head: "ResponseHead | int") -> "ResponseHead":
        if isinstance(head, ResponseHead):
            return head
        if isinstance(head, bool) or not isinstance(head, int):
            raise TypeError("status must be an int or ResponseHead")
        return cls(status=head)

    def is_success(self) -> bool:
        return 200 <= self.status <= 299


__all__ = [
    "ResponseHead",
]
