"""Minimal example for keyed-collection access over mappings and pair sequences."""

from gen_util import keyval


def main() -> None:
    """Show how put and replace treat repeated keys."""
    headers = [("accept", "text/html"), ("cookie", "a=1"), ("cookie", "b=2")]
    print("cookies:", keyval.get_all(headers, "cookie"))
    print("put:", keyval.put(headers, "cookie", "c=3"))
    print("replace:", keyval.replace(headers, "cookie", "redacted"))

    settings = {"debug": False}
    print("fetch:", keyval.fetch(settings, "debug"))
    print("put_copy:", keyval.put_copy(settings, {"debug": True}, "debug"))


if __name__ == "__main__":
    main()
