"""The music library: an ordered collection of songs."""

from __future__ import annotations

import os
from typing import Iterator

from .song import Song, read_songs, write_songs


class MusicLibrary:
    """An ordered collection of songs that can be loaded and saved."""

    def __init__(self, songs: list[Song] | None = None) -> None:
        self.songs: list[Song] = list(songs or [])

    def __iter__(self) -> Iterator[Song]:
        return iter(self.songs)

    def __len__(self) -> int:
        return len(self.songs)

    def add(self, song: Song) -> None:
        """Append a song to the library."""
        self.songs.append(song)

    def find(self, title: str) -> Song | None:
        """Return the first song with the given title, or None."""
        return next((song for song in self.songs if song.title == title), None)

    def remove(self, title: str) -> bool:
        """Remove every song with the given title; report whether any was removed."""
        kept = [song for song in self.songs if song.title != title]
        removed = len(kept) != len(self.songs)
        self.songs = kept
        return removed

    def load(self, path: str | os.PathLike[str]) -> None:
        """Append the songs stored in a file; raises OSError if it cannot be read."""
        self.songs.extend(read_songs(path))

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write all songs to a file; raises OSError if it cannot be written."""
        write_songs(path, self.songs)

    def describe(self) -> str:
        """Return a listing of the library."""
        if not self.songs:
            return "Library is empty.\n"
        lines = ["=== Music Library ==="]
        lines.extend(song.describe() for song in self.songs)
        return "\n".join(lines) + "\n"