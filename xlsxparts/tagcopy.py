"""Copy XML elements with a given tag from one document text into another."""

from __future__ import annotations

# Places to insert copied elements when the target has none of its own.
_DEFAULT_POSITIONS = ("</styleSheet>", "<pageMargins", "</workbook>")


def _collect(source: str, open_tag: str, close_tag: str, end_tag: str) -> str:
    """Return every occurrence of the element in `source`, concatenated."""
    blocks: list[str] = []
    start_index = 0
    while True:
        start = source.find(open_tag, start_index)
        if start < 0:
            break
        end = source.find(close_tag, start)
        ending = end_tag
        if end < 0:
            end = source.find("/>", start)
            ending = "/>"
        if end < 0:
            break
        blocks.append(source[start:end] + ending)
        start_index = end + len(ending)
    return "".join(blocks)


def _remove_all(target: str, open_tag: str, close_tag: str, end_tag: str) -> tuple[str, int]:
    """Remove every occurrence of the element; return the text and the first position or -1."""
    first_position = -1
    while True:
        start = target.find(open_tag)
        if start < 0:
            break
        end = target.find(close_tag)
        ending = end_tag
        if end < 0:
            end = target.find("/>", start)
            ending = "/>"
        if end < 0:
            break
        if first_position < 0:
            first_position = start
        shortened = target[:start] + target[end + len(ending):]
        if len(shortened) >= len(target):
            # malformed text (closing tag before opening tag): nothing more to remove
            break
        target = shortened
    return target, first_position


def copy_tag(source: str, target: str, tag: str) -> str:
    """Replace the `tag` elements of `target` with those found in `source`.

    If `source` holds no such element, `target` is returned unchanged. The copied
    elements go where the first removed one stood, or else before the first of
    the closing ``styleSheet`` tag, a ``pageMargins`` element or the closing
    ``workbook`` tag; if none of these is present nothing is inserted.
    """
    open_tag = "<" + tag
    close_tag = "</" + tag
    end_tag = "</" + tag + ">"

    copied = _collect(source, open_tag, close_tag, end_tag)
    if not copied:
        return target

    result, position = _remove_all(target, open_tag, close_tag, end_tag)

    if position < 0:
        for marker in _DEFAULT_POSITIONS:
            found = result.find(marker)
            if found >= 0:
                position = found
                break

    if position >= 0:
        result = result[:position] + copied + result[position:]
    return result