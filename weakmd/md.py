# Weakmd project, MIT license.
#
# Derived from Yuio, https://github.com/taminomara/yuio/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

r"""
A parser for the in-house markdown dialect.

.. autofunction:: parse

The dialect is tiny:

- headings:

  .. code-block:: markdown

     # Heading 1
     ## Heading 2

  Any number of hashes is accepted, ``#################### Heading``
  becomes an ``<h20>``.

- unordered lists, blank lines between items are allowed:

  .. code-block:: markdown

     * List item 1,
     * list item 2.

- paragraphs, one per line:

  .. code-block:: markdown

     This line becomes a paragraph.

Inline markup only handles emphasis. Triple underscores are replaced first,
then double, then single ones::

    >>> parse("___strong emphasis___ and __strong__ and _emphasis_")
    '<p><strong><em>strong emphasis</em></strong> and <strong>strong</strong> and <em>emphasis</em></p>'

Note that nothing is escaped, HTML in the input is passed through as is.


Writing parsers
---------------

Parsing is done by plain functions that share a single
:class:`~weakmd.cursor.Cursor`. There are three kinds of them:

- *workers* do a tiny job, like skipping an empty line, and report whether
  they've done it;
- *expression parsers*, named ``try_parsing_*``, parse a single construct,
  like a heading or a list item. They return rendered HTML, or :data:`None`
  if the construct is not at the cursor;
- *mode parsers*, named ``parse_*_mode``, try several parsers in order
  of precedence, and repeat them.

A parser that returns :data:`None` must leave the cursor where it found it.
The :func:`speculative` decorator takes care of that.

A mode parser should start with a *gate*, that is, an expression parser whose
success means that the mode should be entered at all.
See :func:`parse_unordered_list_mode` for an example::

    >>> cursor = weakmd.cursor.Cursor("* a\n\n* b\ntext")
    >>> parse_unordered_list_mode(cursor)
    '<ul><li>a</li><li>b</li></ul>'
    >>> cursor.rest()
    'text'
    >>> print(parse_unordered_list_mode(cursor))
    None
    >>> cursor.rest()
    'text'

.. autofunction:: speculative

.. autofunction:: parse_document_mode

.. autofunction:: parse_unordered_list_mode

.. autofunction:: parse_paragraph_mode

.. autofunction:: try_parsing_heading

.. autofunction:: try_parsing_list_item

.. autofunction:: try_parsing_line

.. autofunction:: skip_blank_line

.. autoclass:: UnparsedRemainderWarning

"""

from __future__ import annotations

import functools
import re
import warnings

import weakmd
import weakmd.cursor
from weakmd import _typing as _t

__all__ = [
    "UnparsedRemainderWarning",
    "parse",
    "parse_document_mode",
    "parse_paragraph_mode",
    "parse_unordered_list_mode",
    "skip_blank_line",
    "speculative",
    "try_parsing_heading",
    "try_parsing_line",
    "try_parsing_list_item",
]

T = _t.TypeVar("T")


class UnparsedRemainderWarning(weakmd.WeakmdWarning):
    """
    Issued when the end of a document can't be parsed and gets dropped.

    """


def parse(markdown: str, /) -> str:
    r"""
    Convert markdown into HTML.

    This function never fails. If some part of the document can't be parsed,
    it is dropped from the output, and :class:`UnparsedRemainderWarning`
    is issued.

    :param markdown:
        document to convert.
    :returns:
        concatenated HTML of all blocks, in document order.
    :example:
        ::

            >>> parse("# Title\n\n* a\n* b\ntext\n")
            '<h1>Title</h1><ul><li>a</li><li>b</li></ul><p>text</p>'

    """

    return parse_document_mode(weakmd.cursor.Cursor(markdown))


def speculative(
    parser: _t.Callable[[weakmd.cursor.Cursor], T | None], /
) -> _t.Callable[[weakmd.cursor.Cursor], T | None]:
    """
    Restore cursor position if the wrapped parser returns :data:`None`.

    """

    @functools.wraps(parser)
    def wrapper(cursor: weakmd.cursor.Cursor, /) -> T | None:
        with cursor.checkpoint() as checkpoint:
            result = parser(cursor)
            if result is not None:
                checkpoint.commit()
        return result

    return wrapper


def parse_document_mode(cursor: weakmd.cursor.Cursor, /) -> str:
    """
    Parse blocks until the end of the document.

    Blocks are tried in order: heading, list, paragraph. Since a paragraph
    accepts any line, this mode consumes the whole input.

    """

    result: list[str] = []

    while cursor.remaining():
        while skip_blank_line(cursor):
            pass
        if not cursor.remaining():
            break

        if (out := try_parsing_heading(cursor)) is not None:
            result.append(out)
            continue
        if (out := parse_unordered_list_mode(cursor)) is not None:
            result.append(out)
            continue
        if (out := parse_paragraph_mode(cursor)) is not None:
            result.append(out)
            continue

        weakmd._logger.warning(
            "unable to parse the rest at offset %s: %r", cursor.position, cursor.rest()
        )
        warnings.warn(
            f"unable to parse the rest: {cursor.rest()!r}", UnparsedRemainderWarning
        )
        break

    return "".join(result)


@speculative
def parse_unordered_list_mode(cursor: weakmd.cursor.Cursor, /) -> str | None:
    """
    Parse consecutive list items into a single ``<ul>``.

    Blank lines between items don't break the list.

    """

    if (out := try_parsing_list_item(cursor)) is None:
        return None

    result = ["<ul>", out]

    while cursor.remaining():
        while skip_blank_line(cursor):
            pass

        if (out := try_parsing_list_item(cursor)) is not None:
            result.append(out)
            continue

        break

    result.append("</ul>")
    return "".join(result)


@speculative
def parse_paragraph_mode(cursor: weakmd.cursor.Cursor, /) -> str | None:
    """
    Parse a single line as a paragraph.

    """

    if (out := try_parsing_line(cursor)) is None:
        return None
    return f"<p>{out}</p>"


_HEADING_RE = re.compile(r"#+ ")


@speculative
def try_parsing_heading(cursor: weakmd.cursor.Cursor, /) -> str | None:
    """
    Parse a heading.

    Heading marker must be followed by a single space, and there must be something
    after it, otherwise the line is not a heading. A marker at the very end
    of the document, like ``"# "``, stays a paragraph. Heading level is
    the number of hashes, it is not limited to six.

    """

    prefix = cursor.match(_HEADING_RE)
    if not prefix or prefix.end() == len(cursor.text):
        return None

    level = len(prefix.group()) - 1
    cursor.seek(prefix.end())

    if (out := try_parsing_line(cursor)) is None:
        return None
    return f"<h{level}>{out}</h{level}>"


_LIST_ITEM_RE = re.compile(r"\* ")


@speculative
def try_parsing_list_item(cursor: weakmd.cursor.Cursor, /) -> str | None:
    """
    Parse an unordered list item.

    """

    prefix = cursor.match(_LIST_ITEM_RE)
    if not prefix:
        return None

    cursor.seek(prefix.end())

    if (out := try_parsing_line(cursor)) is None:
        return None
    return f"<li>{out}</li>"


_FULL_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n|\Z)")
_STRONG_ITALIC_RE = re.compile(r"___(.+)___")
_STRONG_RE = re.compile(r"__(.+)__")
_ITALIC_RE = re.compile(r"_(.+)_")


@speculative
def try_parsing_line(cursor: weakmd.cursor.Cursor, /) -> str | None:
    """
    Parse text up to the end of line, and render its inline markup.

    Surrounding whitespace is stripped. Line terminator is consumed,
    but not rendered. At the end of the document, this parser succeeds
    with an empty string.

    """

    line = cursor.match(_FULL_LINE_RE)
    if not line:
        return None

    output = line.group().strip()
    output = _STRONG_ITALIC_RE.sub(r"<strong><em>\1</em></strong>", output)
    output = _STRONG_RE.sub(r"<strong>\1</strong>", output)
    output = _ITALIC_RE.sub(r"<em>\1</em>", output)

    cursor.seek(line.end())

    return output


_LINE_TERMINATOR_RE = re.compile(r"\r\n|\r|\n")


def skip_blank_line(cursor: weakmd.cursor.Cursor, /) -> bool:
    r"""
    If the cursor is at a line terminator, move past it.

    Line terminator is one of ``\n``, ``\r\n``, or ``\r``.

    :returns:
        :data:`True` if a line was skipped.

    """

    if line_end := cursor.match(_LINE_TERMINATOR_RE):
        cursor.seek(line_end.end())
        return True
    return False
