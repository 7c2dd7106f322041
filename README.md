# tunebox

tunebox is a small console music player. It keeps a library of songs and lets
you build named playlists. It records which songs you played during a session.
Before the menu opens, you log in or register.

## Installing

```
pip install .
```

## Running

```
tunebox [--library FILE] [--users FILE] [--playlists DIR]
```

- `--library`: the song library file. The default is `data/songs.txt`.
- `--users`: the file of registered accounts. The default is `users.txt`.
- `--playlists`: the directory that holds the playlist files. The default is
  the current directory.

The library is read when the player starts. If the library file cannot be
read, the player prints `Failed to open file for reading.` and starts with an
empty library. When the player exits, the library is written back to the same
file. If the file cannot be written, for example because its directory does
not exist, the player prints `Failed to open file for saving.`

### Logging in and registering

At startup you choose between logging in and registering. Accounts are kept
in the users file, one per line, as `username password`.

- If the login fails, the player exits.
- If you register under a new name, a line is added to the users file and the
  player exits. Run `tunebox` again and log in with the new account.
- If you register under a name that is already taken, the player says so and
  opens the menu anyway.

### The menu

After you log in, a numbered menu appears:

1. Add a song to the library
2. Display the library
3. Add a song to a named playlist
4. Show the playlist names
5. Play the current playlist
6. Play a song by title
7. Create a new playlist. The new playlist becomes the current one.
8. Select a playlist
9. Delete a playlist
10. Delete a song from the current playlist
11. Delete a song from the library and from every playlist
12. View the listening history for this session

Enter `0` to leave the menu.

At startup the current playlist is `My Playlist`. It is loaded from
`My Playlist.txt` if that file exists. It is not in the list of playlists that
you can show, select or add songs to by name. Option 5 plays only after at
least one playlist has been created.

During playback, press Enter to stop the song or to move on to the next one.

Deleting a playlist removes it from the session. Its file stays on disk.

## File format

The library file and the playlist files have the same format. Each playlist
is stored as `<name>.txt` in the playlist directory. Every change to a
playlist is written to its file at once.

Each song takes one line:

```
title artist album duration filename
```

Fields are separated by whitespace, so a field cannot contain spaces. Reading
stops at the first record whose duration is not a number. An incomplete
record at the end of the file is ignored.

## Using it as a library

```python
from tunebox.song import Song
from tunebox.library import MusicLibrary
from tunebox.playlist import Playlist

library = MusicLibrary()
library.add(Song("Intro", "Band", "Debut", 3.5, "intro.wav"))
library.save("songs.txt")

mix = Playlist("Mix", ".")
mix.add(library.find("Intro"))
print(mix.describe())
```

The modules provide the following:

- `tunebox.song`
  - `Song`
  - `parse_songs`, `read_songs` and `write_songs`, which read and write the
    record format
- `tunebox.library.MusicLibrary`
  - `add`, `find`, `remove`, `load`, `save` and `describe`
- `tunebox.playlist.Playlist`
  - `add`, `remove`, `load`, `save` and `describe`
- `tunebox.user`
  - `User`, which checks credentials and keeps the in-memory history
  - `UserStore`, which provides `exists`, `register` and `validate` against a
    users file. `register` raises `UserExistsError` when the name is taken.
- `tunebox.player.Player`
  - runs the interactive menu
  - takes an optional input function, output stream and sound backend, which
    is useful for scripting and for tests. A sound backend is any object with
    `play(filename)` and `stop()` methods.

## Limitations

- Sound is played only on Windows, through the standard `winsound` module,
  which plays WAV files. On other systems `play_sound` returns `False` and
  nothing is heard, although the player still shows and records what is
  "playing".
- Passwords are stored in plain text in the users file.
- The listening history is kept in memory only and is lost when the player
  exits.

## Tests

```
pip install .[test]
pytest
```