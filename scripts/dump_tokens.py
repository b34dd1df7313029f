#!/usr/bin/env python
import sys
from pathlib import Path

from toonpy.diagnostics import ToonError
from toonpy.lexer import Lexer, dump_tokens


def main() -> int:
    if len(sys.argv) != 2:
        print("usage: dump_tokens.py PATH", file=sys.stderr)
        return 2

    input_path = Path(sys.argv[1]).expanduser()
    text = input_path.read_text(encoding="utf-8")

    try:
        tokens = Lexer(text).lex()
    except ToonError as error:
        print(f"{input_path}:{error}", file=sys.stderr)
        return 1

    dump_tokens(tokens)
    print(f"{len(tokens)} tokens", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
