"""Minimal example building records from untyped request data."""

from dataclasses import dataclass

from gen_util import build, merge_or_raise, record


@record
@dataclass(frozen=True)
class Point:
    x: int
    y: int


def main() -> None:
    """Build, reject and merge ``Point`` records."""
    print("build:", build({"x": 1, "y": 2, "z": 3, "unknown_key": 4}, Point))
    print("missing y:", build({"x": 1}, Point))
    print("merge:", merge_or_raise(Point(1, 2), {"x": 9}))


if __name__ == "__main__":
    main()
