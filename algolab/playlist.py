"""A circular music playlist with a play cursor, and its interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Optional


class Playlist:
    """Songs in a circle with a cursor on the song now playing.

    The first song added becomes the one playing. Removing a song makes the
    song after it the head of the playlist.
    """

    def __init__(self) -> None:
        self._songs: list[str] = []
        self._current: Optional[int] = None

    @property
    def current(self) -> Optional[str]:
        """The song the cursor is on, or ``None`` when the playlist is empty."""
        return None if self._current is None else self._songs[self._current]

    def add(self, name: str) -> None:
        """Append a song at the end of the playlist."""
        self._songs.append(name)
        if self._current is None:
            self._current = 0

    def remove(self, name: str) -> None:
        """Remove the first song called ``name``, searching from the head."""
        if not self._songs:
            raise ValueError("the playlist is empty")
        try:
            index = self._songs.index(name)
        except ValueError:
            raise ValueError(f"no song called {name!r}") from None
        size = len(self._songs)
        self._songs = self._songs[index + 1 :] + self._songs[:index]
        if not self._songs:
            self._current = None
        elif self._current == index:
            self._current = 0
        else:
            assert self._current is not None
            self._current = (self._current - index - 1) % (size - 1)

    def _require_songs(self) -> None:
        if not self._songs:
            raise IndexError("the playlist is empty")

    def next(self) -> str:
        """Move the cursor to the following song, wrapping round, and return it."""
        self._require_songs()
        assert self._current is not None
        self._current = (self._current + 1) % len(self._songs)
        return self._songs[self._current]

    def previous(self) -> str:
        """Move the cursor to the preceding song, wrapping round, and return it."""
        self._require_songs()
        assert self._current is not None
        self._current = (self._current - 1) % len(self._songs)
        return self._songs[self._current]

    def first(self) -> str:
        """The song at the head of the playlist."""
        self._require_songs()
        return self._songs[0]

    def last(self) -> str:
        """The song at the end of the playlist."""
        self._require_songs()
        return self._songs[-1]

    def find(self, name: str) -> Optional[int]:
        """Position of the first song called ``name`` counted from the head, or ``None``."""
        try:
            return self._songs.index(name)
        except ValueError:
            return None

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._songs))

    def __len__(self) -> int:
        return len(self._songs)


_MENU = """
-----Song Playlist Application-----
1. Add Music
2. Remove Music
3. Show Playlist
4. Play next file
5. Play previous file,
6. Play first file
7. Play Last file
8. Play specific file.
9. Exit
"""


def _ask(prompt: str) -> str:
    print(prompt)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _show(playlist: Playlist) -> None:
    if not playlist:
        print("Playlist is Empty!")
        return
    print()
    print("Displaying Playlist :")
    for number, name in enumerate(playlist, start=1):
        print(f"Song {number} : {name}")


def _remove(playlist: Playlist) -> None:
    if not playlist:
        print("No Music is there to delete!")
        return
    name = _ask("Enter Music Name to delete:")
    print()
    try:
        playlist.remove(name)
    except ValueError:
        print("No Music file is there!")
        return
    if playlist:
        print("Music deleted!")
    else:
        print("One file deleted! Playlist is Empty Now!")


def _play_specific(playlist: Playlist) -> None:
    if not playlist:
        print("No music is there to be searched!")
        return
    name = _ask("Enter Music Name to search:")
    print()
    if playlist.find(name) is None:
        print("There is no Music file with this name!")
    else:
        print("Music Found!")
        print(f"Playing Music : {name}")


def _step(playlist: Playlist, forward: bool) -> None:
    if not playlist:
        print("No songs in Playlist!")
    elif forward:
        print(f"Playing Next Song : {playlist.next()}")
    else:
        print(f"Playing Previous Song : {playlist.previous()}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the playlist menu on standard input until Exit or end of input."""
    playlist = Playlist()
    while True:
        try:
            choice = _ask(_MENU).strip()
            if choice == "1":
                playlist.add(_ask("Enter Music Name:"))
            elif choice == "2":
                _remove(playlist)
            elif choice == "3":
                _show(playlist)
            elif choice == "4":
                _step(playlist, forward=True)
            elif choice == "5":
                _step(playlist, forward=False)
            elif choice == "6":
                if playlist:
                    print(f"Playing First Music : {playlist.first()}")
                else:
                    print("Playlist is Empty!")
            elif choice == "7":
                if playlist:
                    print(f"Playing Last Music : {playlist.last()}")
                else:
                    print("Playlist is Empty!")
            elif choice == "8":
                _play_specific(playlist)
            else:
                return 0
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())