from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Genders accepted at candidate registration."""

    MALE = "Male"
    FEMALE = "Female"


class Bucket(str, Enum):
    """Outcome classification of one item in a bulk operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    ERROR = "error"


class CandidateSort(str, Enum):
    UID = "uid"
    NAME = "name"
    TOTAL_POINTS = "total_points"
    TODAY_POINTS = "today_points"
