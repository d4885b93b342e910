import os

# Constants

RESET = "\033[0m"


def supports_true_color() -> bool:
    """
    Return True if the terminal claims to support 24-bit (true-color).
    We check COLORTERM and TERM for the usual markers.
    """
    # 1) Check COLORTERM
    ct = os.getenv("COLORTERM", "")
    if "truecolor" in ct.lower() or "24bit" in ct.lower():
        return True

    # 2) Check TERM
    term = os.getenv("TERM", "")
    if "truecolor" in term.lower() or "24bit" in term.lower():
        return True

    return False


def rgb_to_8b(red: int, green: int, blue: int) -> int:
    """
    Closest entry of the 6x6x6 color cube of 256-color terminals.
    """
    def level(channel: int) -> int:
        return round(channel / 255 * 5)

    return 16 + 36 * level(red) + 6 * level(green) + level(blue)


def bg_color_8b(code: int) -> str:
    """
    Return the ANSI escape code for background color 'code' (48;5;code).
    """
    return f"\033[48;5;{code}m"


def fg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[38;2;{red};{green};{blue}m"


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def bg_color(red: int, green: int, blue: int, true_color: bool | None = None) -> str:
    """
    Background escape code for an RGB color, degraded to the 256-color cube
    when the terminal does not advertise true-color support.
    """
    if true_color is None:
        true_color = supports_true_color()
    if true_color:
        return bg_color_24b(red, green, blue)
    return bg_color_8b(rgb_to_8b(red, green, blue))


def contrasting_fg(red: int, green: int, blue: int) -> str:
    """Black or white foreground, whichever reads better on the given background."""
    luminance = 0.299 * red + 0.587 * green + 0.114 * blue
    return fg_color_24b(0, 0, 0) if luminance > 128 else fg_color_24b(255, 255, 255)


if __name__ == "__main__":
    for i in range(0, 256, 51):
        for j in range(0, 256, 51):
            print(f"{bg_color(i, j, 128)} {i:3d},{j:3d} {RESET}", end=" ")
        print()
