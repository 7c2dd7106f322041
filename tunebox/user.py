"""Users, their listening history and the file of registered accounts."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


class UserExistsError(Exception):
    """Raised when registering a username that is already taken."""


@dataclass
class User:
    """A user with credentials and a listening history."""

    username: str
    password: str
    history: list[str] = field(default_factory=list)

    def validate_login(self, username: str, password: str) -> bool:
        """Check the given credentials against this user."""
        return username == self.username and password == self.password

    def add_to_history(self, title: str) -> None:
        """Record that a song was played."""
        self.history.append(title)

    def describe_history(self) -> str:
        """Return the listening history as text."""
        lines = ["", "=== Listening History ==="]
        if not self.history:
            lines.append("No songs played yet.")
        else:
            lines.extend(f"- {title}" for title in self.history)
        return "\n".join(lines) + "\n"


class UserStore:
    """Registered accounts kept as ``username password`` lines in a file."""

    def __init__(self, path: str | os.PathLike[str] = "users.txt") -> None:
        self.path = Path(path)

    def _entries(self) -> Iterator[tuple[str, str]]:
        try:
            with open(self.path) as handle:
                for line in handle:
                    tokens = line.split()
                    name = tokens[0] if tokens else ""
                    secret = tokens[1] if len(tokens) > 1 else ""
                    yield name, secret
        except FileNotFoundError:
            return

    def exists(self, username: str) -> bool:
        """Report whether the username is registered."""
        return any(name == username for name, _ in self._entries())

    def register(self, username: str, password: str) -> None:
        """Register a new account; raises UserExistsError if the name is taken."""
        if self.exists(username):
            raise UserExistsError(username)
        with open(self.path, "a") as handle:
            handle.write(f"{username} {password}\n")

    def validate(self, username: str, password: str) -> bool:
        """Check credentials against the registered accounts."""
        return any(
            name == username and secret == password
            for name, secret in self._entries()
        )