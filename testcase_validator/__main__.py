"""Module entrypoint for `python -m testcase_validator`.

Delegates to the linter CLI implementation.
"""

from .linter.run_lint import main


if __name__ == "__main__":
    main()
