"""Command-line walkthroughs of the fixed-point type."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from fixed8.fixed import Fixed, fixed_max


def raw_bits_demo() -> list[str]:
    """Copy a default value around and report the raw bits of each copy."""
    a = Fixed()
    b = Fixed(a)
    c = Fixed()
    c = b
    return [str(value.raw) for value in (a, b, c)]


def conversion_demo() -> list[str]:
    """Build values from ints and floats and show them as floats and ints."""
    a = Fixed()
    b = Fixed(10)
    c = Fixed(42.42)
    d = Fixed(b)
    a = Fixed(1234.4321)
    named = [("a", a), ("b", b), ("c", c), ("d", d)]
    lines = [f"{name} is {value}" for name, value in named]
    lines.extend(f"{name} is {value.to_int()} as integer" for name, value in named)
    return lines


def arithmetic_demo() -> list[str]:
    """Step a value by its smallest increment and compare it with a product."""
    lines: list[str] = []
    a = Fixed()
    b = Fixed(5.05) * Fixed(2)
    lines.append(str(a))
    a = a.next_up()
    lines.append(str(a))
    lines.append(str(a))
    previous, a = a, a.next_up()
    lines.append(str(previous))
    lines.append(str(a))
    lines.append(str(b))
    lines.append(str(fixed_max(a, b)))
    return lines


_DEMOS: dict[str, Callable[[], list[str]]] = {
    "raw": raw_bits_demo,
    "conversion": conversion_demo,
    "arithmetic": arithmetic_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print one demonstration, or all of them in order."""
    parser = argparse.ArgumentParser(
        prog="fixed8", description="Show fixed-point number behaviour."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=[*_DEMOS, "all"],
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    selected = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in selected:
        for line in demo():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())