RESET = "\033[0m"


def foreground(r: int, g: int, b: int) -> str:
    """Truecolor escape that sets the foreground of the text that follows."""
    return f"\033[38;2;{int(r)};{int(g)};{int(b)}m"


def background(r: int, g: int, b: int) -> str:
    """Truecolor escape that sets the background of the text that follows."""
    return f"\033[48;2;{int(r)};{int(g)};{int(b)}m"


def reset() -> str:
    return RESET
