import logging
import sys

from lisple.config import get_log_level
from lisple.errors import LispleError
from lisple.interpreter import Interpreter
from lisple.repl import Repl


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=get_log_level())
    args = sys.argv[1:] if argv is None else argv
    interp = Interpreter()
    try:
        for path in args:
            interp.load(path)
    except (LispleError, RecursionError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return Repl(interp).run()


if __name__ == "__main__":
    sys.exit(main())
