# Weakmd project, MIT license.
#
# Derived from Yuio, https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
A moving view over the document that all parser functions share.

Parser functions never slice the document to pass the remainder around.
Instead, they receive the same :class:`Cursor` and match patterns
against the document starting at the cursor's position::

    >>> import re
    >>> cursor = Cursor("## Heading")
    >>> cursor.match(re.compile(r"#+ ")).end()
    3
    >>> cursor.position
    0

Once a parser is sure that it will succeed, it moves the cursor past whatever
it has consumed. If it needs to try something that may fail, it takes
a checkpoint first::

    >>> with cursor.checkpoint() as checkpoint:
    ...     cursor.advance(3)
    ...     # Didn't call `checkpoint.commit()`, position will be restored.
    >>> cursor.position
    0

.. autoclass:: Cursor
   :members:

.. autoclass:: Checkpoint
   :members:

"""

from __future__ import annotations

import contextlib

from weakmd import _typing as _t

__all__ = [
    "Checkpoint",
    "Cursor",
]


class Cursor:
    """
    A position within a document.

    Exactly one cursor exists per parse invocation. It is passed
    by reference, so every parser observes and moves the same instance.

    :param text:
        document that will be parsed. It is never modified.

    """

    def __init__(self, text: str, /):
        self.__text = text
        self.__position = 0

    @property
    def text(self) -> str:
        """
        The whole document, including the part that was already consumed.

        """

        return self.__text

    @property
    def position(self) -> int:
        """
        Offset of the first unconsumed character.

        """

        return self.__position

    def remaining(self) -> bool:
        """
        Check if there's any input left to consume.

        """

        return self.__position < len(self.__text)

    def seek(self, position: int, /):
        """
        Move cursor to an absolute position.

        Used to restore a previously saved position after a failed
        speculative parse.

        :raises:
            :class:`ValueError` if the position is outside of the document.

        """

        if not 0 <= position <= len(self.__text):
            raise ValueError(
                f"position {position} is out of range 0..{len(self.__text)}"
            )
        self.__position = position

    def advance(self, n: int, /):
        """
        Move cursor ``n`` characters forward.

        """

        self.seek(self.__position + n)

    def peek(self, offset: int = 0, length: int = 1, /) -> str:
        """
        Look at characters starting ``offset`` characters past the current position.

        Returns an empty string when looking past the end of the document.

        """

        start = self.__position + offset
        return self.__text[start : start + length]

    def match(self, pattern: _t.Pattern[str], /) -> _t.Match[str] | None:
        """
        Match a compiled regular expression at the current position.

        The match is anchored to the cursor, but its offsets are absolute,
        so ``cursor.seek(match.end())`` moves past the matched text.
        The cursor itself does not move.

        """

        return pattern.match(self.__text, self.__position)

    def rest(self) -> str:
        """
        Get all characters that weren't consumed yet.

        """

        return self.__text[self.__position :]

    @contextlib.contextmanager
    def checkpoint(self) -> _t.Iterator[Checkpoint]:
        """
        Save current position and restore it upon exiting the context,
        unless :meth:`Checkpoint.commit` was called.

        Position is restored when the context exits with an exception as well.

        """

        checkpoint = Checkpoint(self.__position)
        try:
            yield checkpoint
        finally:
            if not checkpoint.committed:
                self.seek(checkpoint.position)

    def __repr__(self):
        return f"Cursor({self.__position}/{len(self.__text)})"


class Checkpoint:
    """
    A saved cursor position, see :meth:`Cursor.checkpoint`.

    """

    def __init__(self, position: int):
        #: Position that will be restored unless the checkpoint is committed.
        self.position: int = position

        #: Whether :meth:`~Checkpoint.commit` was called.
        self.committed: bool = False

    def commit(self):
        """
        Keep cursor where it is when the checkpoint's context exits.

        """

        self.committed = True

