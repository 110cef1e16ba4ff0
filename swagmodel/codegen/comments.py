import textwrap

__all__ = ['get_comment']


def get_comment(text: str | None) -> str:
    """Normalise a schema description into comment text.

    Line endings are normalised, trailing whitespace and surrounding blank
    lines removed and common indentation dedented. Missing text gives ''.
    """
    if not text:
        return ''

    text = text.replace('\r\n', '\n').replace('\r', '\n')
    lines = [line.rstrip() for line in text.split('\n')]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return textwrap.dedent('\n'.join(lines))
