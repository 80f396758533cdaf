import sys

from cli._runner import run


def main() -> None:
    """Run linting."""
    sys.exit(run(["uv", "run", "ruff", "check", "."]))


def format() -> None:
    """Run code formatting."""
    sys.exit(run(["uv", "run", "ruff", "format", "."]))


if __name__ == "__main__":
    if "--format" in sys.argv[1:]:
        format()
    main()
