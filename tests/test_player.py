import io

from tunebox.library import MusicLibrary
from tunebox.player import Player, main
from tunebox.song import Song, read_songs
from tunebox.user import UserStore

INTRO = Song("Intro", "Band", "First", 3.5, "intro.wav")
LOGIN = ["1", "alice", "password"]


class FakeSound:
    def __init__(self):
        self.events = []

    def play(self, filename):
        self.events.append(("play", filename))

    def stop(self):
        self.events.append(("stop", None))


def make_player(tmp_path, lines, songs=()):
    feed = iter(lines)

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    store = UserStore(tmp_path / "users.txt")
    if not store.exists("alice"):
        store.register("alice", "password")
    out = io.StringIO()
    sound = FakeSound()
    player = Player(MusicLibrary(list(songs)), store, tmp_path, read, out, sound)
    return player, out, sound


def test_invalid_credentials_exit(tmp_path):
    player, out, _ = make_player(tmp_path, ["1", "alice", "wrong"])
    player.run()
    assert "Invalid credentials. Exiting..." in out.getvalue()
    assert "Music Player Menu" not in out.getvalue()


def test_register_returns_before_menu(tmp_path):
    player, out, _ = make_player(tmp_path, ["2", "bob", "secret"])
    player.run()
    assert "Registration successful. You can now log in." in out.getvalue()
    assert player.users.validate("bob", "secret") is True
    assert "Music Player Menu" not in out.getvalue()


def test_register_existing_falls_into_menu(tmp_path):
    player, out, _ = make_player(tmp_path, ["2", "alice", "secret", "0"])
    player.run()
    assert "Username already exists." in out.getvalue()
    assert "Exiting Music Player." in out.getvalue()


def test_invalid_first_choice(tmp_path):
    player, out, _ = make_player(tmp_path, ["7"])
    player.run()
    assert out.getvalue().endswith("Invalid choice.\n")


def test_add_song_via_menu(tmp_path):
    lines = LOGIN + ["1", "Intro", "Band", "First", "3.5", "intro.wav", "0"]
    player, out, _ = make_player(tmp_path, lines)
    player.run()
    assert player.library.find("Intro") == INTRO
    assert "Song added to library." in out.getvalue()


def test_play_song_records_history(tmp_path):
    lines = LOGIN + ["6", "Intro", "", "12", "0"]
    player, out, sound = make_player(tmp_path, lines, [INTRO])
    player.run()
    assert sound.events == [("play", "intro.wav"), ("stop", None)]
    assert player.user.history == ["Intro"]
    assert "- Intro" in out.getvalue()


def test_play_unknown_song(tmp_path):
    player, out, sound = make_player(tmp_path, LOGIN + ["6", "Missing", "0"])
    player.run()
    assert "Song not found." in out.getvalue()
    assert sound.events == []


def test_create_playlist_and_add_song(tmp_path):
    lines = LOGIN + ["7", "Road", "3", "Road", "Intro", "0"]
    player, out, _ = make_player(tmp_path, lines, [INTRO])
    player.run()
    assert read_songs(tmp_path / "Road.txt") == [INTRO]
    assert player.current_playlist.name == "Road"


def test_add_to_missing_playlist(tmp_path):
    player, out, _ = make_player(tmp_path, LOGIN + ["3", "Nope", "0"], [INTRO])
    player.run()
    assert "Playlist not found." in out.getvalue()


def test_delete_song_from_library_cascades(tmp_path):
    lines = LOGIN + ["7", "Road", "3", "Road", "Intro", "11", "Intro", "0"]
    player, out, _ = make_player(tmp_path, lines, [INTRO])
    player.run()
    assert player.library.find("Intro") is None
    assert read_songs(tmp_path / "Road.txt") == []
    assert "Song deleted from library and all playlists." in out.getvalue()


def test_play_without_playlists(tmp_path):
    player, out, sound = make_player(tmp_path, LOGIN + ["5", "0"])
    player.run()
    assert "No playlists available to play." in out.getvalue()
    assert sound.events == []


def test_play_playlist_plays_every_song(tmp_path):
    lines = LOGIN + ["7", "Road", "3", "Road", "Intro", "5", "", "0"]
    player, out, sound = make_player(tmp_path, lines, [INTRO])
    player.run()
    assert sound.events == [("play", "intro.wav"), ("stop", None)]
    assert "=== Playing Playlist: Road ===" in out.getvalue()
    assert player.user.history == []


def test_delete_playlist(tmp_path):
    lines = LOGIN + ["7", "Road", "9", "Road", "4", "0"]
    player, out, _ = make_player(tmp_path, lines)
    player.run()
    assert player.playlists == []
    assert "Playlist deleted: Road" in out.getvalue()
    assert "No playlists available." in out.getvalue()


def test_select_playlist(tmp_path):
    lines = LOGIN + ["7", "Road", "7", "Home", "8", "Road", "0"]
    player, out, _ = make_player(tmp_path, lines)
    player.run()
    assert player.current_playlist.name == "Road"
    assert "Selected playlist: Road" in out.getvalue()


def test_main_saves_library(tmp_path, monkeypatch, capsys):
    library_path = tmp_path / "songs.txt"
    library_path.write_text(INTRO.to_record() + "\n")
    answers = iter(["1", "nobody", "secret"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    code = main(
        [
            "--library",
            str(library_path),
            "--users",
            str(tmp_path / "users.txt"),
            "--playlists",
            str(tmp_path),
        ]
    )
    assert code == 0
    assert read_songs(library_path) == [INTRO]
    assert "Invalid credentials. Exiting..." in capsys.readouterr().out