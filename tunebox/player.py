"""The interactive console player and its entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Protocol, TextIO

from .library import MusicLibrary
from .playlist import Playlist
from .song import Song
from .user import User, UserExistsError, UserStore

try:
    import winsound
except ImportError:
    winsound = None  # type: ignore[assignment]

DEFAULT_PLAYLIST = "My Playlist"
SESSION_USER = "admin"
SESSION_PASSWORD = "password"

MENU = """
=== Music Player Menu ===
1. Add Song to Library
2. Display Library
3. Add Song to Playlist
4. Show Playlist
5. Play Playlist
6. Play a Song by Title
7. Create New Playlist
8. Select Playlist
9. Delete Playlist
10. Delete Song from Playlist
11. Delete Song from Library
12. View Listening History
0. Exit
"""


def play_sound(filename: str) -> bool:
    """Start playing a WAV file asynchronously; report whether playback started."""
    if winsound is None:
        return False
    winsound.PlaySound(filename, winsound.SND_FILENAME | winsound.SND_ASYNC)
    return True


def stop_sound() -> None:
    """Stop any sound started with play_sound."""
    if winsound is not None:
        winsound.PlaySound(None, 0)


class SoundBackend(Protocol):
    def play(self, filename: str) -> object: ...

    def stop(self) -> object: ...


class _SystemSound:
    def play(self, filename: str) -> bool:
        return play_sound(filename)

    def stop(self) -> None:
        stop_sound()


class Player:
    """A menu-driven music player reading commands line by line."""

    def __init__(
        self,
        library: MusicLibrary | None = None,
        users: UserStore | None = None,
        playlist_dir: str | os.PathLike[str] = ".",
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        sound: SoundBackend | None = None,
    ) -> None:
        self.library = library if library is not None else MusicLibrary()
        self.users = users if users is not None else UserStore()
        self.playlist_dir = playlist_dir
        self._input = input_func or input
        self._output = output if output is not None else sys.stdout
        self._sound = sound if sound is not None else _SystemSound()
        self.user = User(SESSION_USER, SESSION_PASSWORD)
        self.playlists: list[Playlist] = []
        self.current_playlist: Playlist | None = Playlist(
            DEFAULT_PLAYLIST, playlist_dir
        )
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_song_to_library,
            2: lambda: self._say(self.library.describe()),
            3: self.add_song_to_playlist,
            4: self.show_playlists,
            5: self.play_current_playlist,
            6: self.play_song_by_title,
            7: self.create_playlist,
            8: self.select_playlist,
            9: self.delete_playlist,
            10: self.delete_song_from_playlist,
            11: self.delete_song_from_library,
            12: lambda: self._say(self.user.describe_history()),
        }

    def _say(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self._input()

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _wait(self) -> None:
        try:
            self._input()
        except EOFError:
            pass

    def _find_playlist(self, name: str) -> Playlist | None:
        return next((pl for pl in self.playlists if pl.name == name), None)

    def run(self) -> None:
        """Sign in or register, then serve the menu until the user exits."""
        try:
            if self._sign_in():
                self._menu_loop()
        except EOFError:
            return

    def _sign_in(self) -> bool:
        self._say("=== Music Player ===\n1. Login\n2. Register\n")
        choice = self._ask_int("Enter choice: ")
        if choice == 1:
            self._say("=== Login ===\n")
            username = self._ask("Username: ")
            typed = self._ask("Password: ")
            if not self.users.validate(username, typed):
                self._say("Invalid credentials. Exiting...\n")
                return False
            self._say(f"Login successful. Welcome, {username}!\n")
            return True
        if choice == 2:
            self._say("=== Register ===\n")
            username = self._ask("Choose a username: ")
            typed = self._ask("Choose a password: ")
            try:
                self.users.register(username, typed)
            except UserExistsError:
                self._say("Username already exists.\n")
                return True
            except OSError:
                self._say("Error opening file for registration.\n")
                return True
            self._say("Registration successful!\n")
            self._say("Registration successful. You can now log in.\n")
            return False
        self._say("Invalid choice.\n")
        return False

    def _menu_loop(self) -> None:
        while True:
            self._say(MENU)
            choice = self._ask_int("Enter choice: ")
            if choice == 0:
                self._say("Exiting Music Player.\n")
                return
            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._say("Invalid choice.\n")
            else:
                action()

    def add_song_to_library(self) -> None:
        """Ask for a song's details and add it to the library."""
        title = self._ask("Enter title: ")
        artist = self._ask("Enter artist: ")
        album = self._ask("Enter album: ")
        try:
            duration = float(self._ask("Enter duration (minutes): ").strip())
        except ValueError:
            duration = 0.0
        filename = self._ask("Enter filename (e.g., song.wav): ")
        self.library.add(Song(title, artist, album, duration, filename))
        self._say("Song added to library.\n")

    def add_song_to_playlist(self) -> None:
        """Add a library song to a named playlist."""
        name = self._ask("Enter the playlist name to add song to: ")
        playlist = self._find_playlist(name)
        if playlist is None:
            self._say("Playlist not found.\n")
            return
        title = self._ask("Enter the song title to add: ")
        song = self.library.find(title)
        if song is None:
            self._say("Song not found in library.\n")
            return
        playlist.add(song)
        self._say(f"Song added to playlist: {name}\n")

    def play_song(self, song: Song) -> None:
        """Play one song until Enter is pressed and record it in the history."""
        self._say(f"Now Playing: {song.title}\n")
        self._sound.play(song.filename)
        self.user.add_to_history(song.title)
        self._say("(Press Enter to stop playback)\n")
        self._wait()
        self._sound.stop()

    def play_song_by_title(self) -> None:
        """Ask for a title and play that song from the library."""
        title = self._ask("Enter song title to play: ")
        song = self.library.find(title)
        if song is None:
            self._say("Song not found.\n")
        else:
            self.play_song(song)

    def play_current_playlist(self) -> None:
        """Play every song of the selected playlist, advancing on Enter."""
        if not self.playlists:
            self._say("No playlists available to play.\n")
            return
        playlist = self.current_playlist
        if playlist is None:
            self._say("No playlist selected.\n")
            return
        self._say(f"=== Playing Playlist: {playlist.name} ===\n")
        for song in playlist.songs:
            self._say(f"Now Playing: {song.title}\n")
            self._sound.play(song.filename)
            self._say("(Press Enter to play next...)\n")
            self._wait()
            self._sound.stop()

    def create_playlist(self) -> None:
        """Create a playlist and make it the current one."""
        name = self._ask("Enter the name for the new playlist: ")
        playlist = Playlist(name, self.playlist_dir)
        self.playlists.append(playlist)
        self.current_playlist = playlist
        self._say(f"Playlist created and selected: {name}\n")

    def select_playlist(self) -> None:
        """Make a named playlist the current one."""
        name = self._ask("Enter the name of the playlist you want to select: ")
        playlist = self._find_playlist(name)
        if playlist is None:
            self._say("Playlist not found.\n")
            return
        self.current_playlist = playlist
        self._say(f"Selected playlist: {name}\n")

    def delete_playlist(self) -> None:
        """Forget a named playlist."""
        name = self._ask("Enter the name of the playlist to delete: ")
        kept = [pl for pl in self.playlists if pl.name != name]
        if len(kept) == len(self.playlists):
            self._say("Playlist not found.\n")
            return
        self.playlists = kept
        if self.current_playlist is not None and self.current_playlist.name == name:
            self.current_playlist = None
        self._say(f"Playlist deleted: {name}\n")

    def delete_song_from_playlist(self) -> None:
        """Remove a song from the current playlist."""
        title = self._ask("Enter the song title to remove from the playlist: ")
        if self.current_playlist is None:
            self._say("No playlist selected.\n")
            return
        self.current_playlist.remove(title)
        self._say("Song removed from playlist.\n")

    def delete_song_from_library(self) -> None:
        """Remove a song from the library and from every playlist."""
        title = self._ask("Enter the title of the song to delete from library: ")
        if not self.library.remove(title):
            self._say("Song not found.\n")
            return
        for playlist in self.playlists:
            playlist.remove(title)
        if self.current_playlist is not None:
            self.current_playlist.remove(title)
        self._say("Song deleted from library and all playlists.\n")

    def show_playlists(self) -> None:
        """List the names of all playlists."""
        if not self.playlists:
            self._say("No playlists available.\n")
            return
        self._say("=== Playlists ===\n")
        for playlist in self.playlists:
            self._say(f"{playlist.name}\n")


def main(argv: list[str] | None = None) -> int:
    """Load the library, run the player and save the library afterwards."""
    parser = argparse.ArgumentParser(prog="tunebox", description="Console music player.")
    parser.add_argument("--library", default="data/songs.txt", help="song library file")
    parser.add_argument("--users", default="users.txt", help="registered users file")
    parser.add_argument("--playlists", default=".", help="directory of playlist files")
    args = parser.parse_args(argv)

    library = MusicLibrary()
    try:
        library.load(args.library)
    except OSError:
        print("Failed to open file for reading.")
    player = Player(library, UserStore(args.users), args.playlists)
    player.run()
    try:
        library.save(args.library)
    except OSError:
        print("Failed to open file for saving.")
    return 0


if __name__ == "__main__":
    sys.exit(main())