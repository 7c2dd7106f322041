"""Songs and the whitespace-separated record format used to store them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


@dataclass(frozen=True)
class Song:
    """A single track in the library."""

    title: str = ""
    artist: str = ""
    album: str = ""
    duration: float = 0.0
    filename: str = ""

    def describe(self) -> str:
        """Return a one-line human-readable description."""
        return (
            f"Title: {self.title}, Artist: {self.artist}, Album: {self.album}, "
            f"Duration: {self.duration:g} mins, Filename: {self.filename}"
        )

    def to_record(self) -> str:
        """Return the song as one space-separated storage record."""
        return (
            f"{self.title} {self.artist} {self.album} "
            f"{self.duration:g} {self.filename}"
        )


def parse_songs(text: str) -> list[Song]:
    """Parse songs from whitespace-separated records.

    Reading stops at the first record whose duration is not a number;
    an incomplete trailing record is ignored.
    """
    tokens = iter(text.split())
    songs = []
    for title, artist, album, duration, filename in zip(
        tokens, tokens, tokens, tokens, tokens
    ):
        try:
            length = float(duration)
        except ValueError:
            break
        songs.append(Song(title, artist, album, length, filename))
    return songs


def read_songs(path: str | os.PathLike[str]) -> list[Song]:
    """Read songs from a file; raises OSError if it cannot be opened."""
    return parse_songs(Path(path).read_text())


def write_songs(path: str | os.PathLike[str], songs: Iterable[Song]) -> None:
    """Write songs to a file, one record per line."""
    with open(path, "w") as handle:
        for song in songs:
            handle.write(song.to_record() + "\n")