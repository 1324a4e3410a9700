import enum


class Style(enum.Enum):
    none = ""
    reset = "\033[0m"
    bold = "\033[01m"
    underline = "\033[04m"


class Fg(enum.Enum):
    none = ""
    red = "\033[31m"
    green = "\033[32m"
    orange = "\033[33m"
    blue = "\033[34m"
    darkgrey = "\033[90m"


def color(msg: str, fg: Fg | str = Fg.none, style: Style | str = Style.none) -> str:
    fg = fg if isinstance(fg, Fg) else getattr(Fg, fg)
    style = style if isinstance(style, Style) else getattr(Style, style)
    if fg is Fg.none and style is Style.none:
        return msg
    return f"{fg.value}{style.value}{msg}{Style.reset.value}"
