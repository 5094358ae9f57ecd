from .core import mid_string

EXAMPLES = [
    ("", "i"),
    ("", "b"),
    ("", ""),
    ("aaa", "aaz"),
    ("abc", "abcab"),
]


def run() -> None:
    for prev, next in EXAMPLES:
        print(f"{prev or '_'}, {next or '_'} => {mid_string(prev, next)}")


if __name__ == "__main__":
    run()
