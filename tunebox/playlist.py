"""Named playlists persisted to a text file each."""

from __future__ import annotations

import os
from pathlib import Path

from .song import Song, read_songs, write_songs


class Playlist:
    """A named list of songs stored in ``<directory>/<name>.txt``."""

    def __init__(self, name: str, directory: str | os.PathLike[str] = ".") -> None:
        self.name = name
        self.path = Path(directory) / f"{name}.txt"
        self.songs: list[Song] = []
        self.load()

    def add(self, song: Song) -> None:
        """Append a song and persist the playlist."""
        self.songs.append(song)
        self.save()

    def remove(self, title: str) -> bool:
        """Remove every song with the title, saving only if something changed."""
        kept = [song for song in self.songs if song.title != title]
        if len(kept) == len(self.songs):
            return False
        self.songs = kept
        self.save()
        return True

    def load(self) -> None:
        """Append songs from the playlist file; a missing file is ignored."""
        try:
            self.songs.extend(read_songs(self.path))
        except OSError:
            pass

    def save(self) -> bool:
        """Write the playlist file; report whether it could be written."""
        try:
            write_songs(self.path, self.songs)
        except OSError:
            return False
        return True

    def describe(self) -> str:
        """Return a listing of the playlist."""
        if not self.songs:
            return "No songs in the playlist.\n"
        lines = ["=== Playlist ==="]
        for song in self.songs:
            lines.append(f"Title: {song.title}")
            lines.append(song.describe())
        return "\n".join(lines) + "\n"