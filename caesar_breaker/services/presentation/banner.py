from dataclasses import dataclass

from caesar_breaker.core.exceptions import InvalidBannerError

# top-left, top, top-right, left, bottom-right, bottom, bottom-left, right
DOUBLE_LINE = "╔═╗║╝═╚║"
SINGLE_LINE = "┌─┐│┘─└│"
ASCII = "+-+|+-+|"


@dataclass(frozen=True)
class Margins:
    """Blank cells between the frame and the text."""

    top: int = 1
    right: int = 2
    bottom: int = 1
    left: int = 2

    @classmethod
    def symmetric(cls, horizontal: int, vertical: int) -> "Margins":
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)


def border_with_margins(text: str, margins: Margins, glyphs: str = DOUBLE_LINE) -> str:
    """
    Frame multiline text in a box.

    Every line is stripped and padded to the longest line before framing.

    Args:
        text: Text to frame
        margins: Padding between text and frame
        glyphs: Eight frame characters, see ``DOUBLE_LINE``

    Returns:
        The framed text, without a trailing newline
    """
    if len(glyphs) != 8:
        raise InvalidBannerError(
            f"Expected 8 border glyphs, got {len(glyphs)}",
            {"glyphs": glyphs},
        )
    if min(margins.top, margins.right, margins.bottom, margins.left) < 0:
        raise InvalidBannerError("Margins must not be negative", {"margins": margins})

    top_left, top, top_right, left, bottom_right, bottom, bottom_left, right = glyphs

    lines = [line.strip() for line in text.split("\n")]
    width = max((len(line) for line in lines), default=0)
    inner = margins.left + width + margins.right
    blank = f"{left}{' ' * inner}{right}"

    framed = [f"{top_left}{top * inner}{top_right}"]
    framed.extend(blank for _ in range(margins.top))
    framed.extend(
        f"{left}{' ' * margins.left}{line.ljust(width)}{' ' * margins.right}{right}"
        for line in lines
    )
    framed.extend(blank for _ in range(margins.bottom))
    framed.append(f"{bottom_left}{bottom * inner}{bottom_right}")

    return "\n".join(framed)


def border(
    text: str,
    horizontal_margin: int = 2,
    vertical_margin: int = 1,
    glyphs: str = DOUBLE_LINE,
) -> str:
    """Frame text with the same margin on the left/right and top/bottom."""
    return border_with_margins(
        text,
        Margins.symmetric(horizontal_margin, vertical_margin),
        glyphs,
    )


def border_uniform(text: str, margin: int, glyphs: str = DOUBLE_LINE) -> str:
    """Frame text with the same margin on all four sides."""
    return border_with_margins(text, Margins(margin, margin, margin, margin), glyphs)
