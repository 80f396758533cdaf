import sys

from cli._runner import run


def main() -> None:
    """Run unit tests."""
    sys.exit(run(["uv", "run", "pytest"]))


def test_v() -> None:
    """Run unit tests with verbose output."""
    sys.exit(run(["uv", "run", "pytest", "-v"]))


if __name__ == "__main__":
    main()
