"""Domain models for cs_session.

A Session is a per-request capability: handlers receive one through
FastAPI Depends, read and mutate `data`, and SessionService persists it
to the external store. No session state lives in the process.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

SESSION_KEY_PREFIX = "sess:"


def session_key(session_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"


@dataclass
class Session:
    session_id: str
    data: dict[str, Any] = field(default_factory=dict)
    is_new: bool = True
    _loaded: dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._loaded = copy.deepcopy(self.data)

    @property
    def modified(self) -> bool:
        return self.data != self._loaded

    def mark_saved(self) -> None:
        self._loaded = copy.deepcopy(self.data)
        self.is_new = False
