"""Typed outcomes of orchestrated blog operations."""

from enum import StrEnum


class Outcome(StrEnum):
    """Terminal states of a blog mutation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    PRECONDITION_FAILED = "precondition_failed"
    UNEXPECTED = "unexpected"
