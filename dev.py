"""Development script to run checks (linting, tests) and a sample lookup."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a sample lookup."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample candidate listing."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")
    else:
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")

    run_command(["uv", "run", "pytest"], "Tests")

    if args.ci:
        print("\nCI checks passed successfully.")
        return

    run_command(
        [
            "uv",
            "run",
            "python",
            "-m",
            "script_finder.resolve_script",
            "org.example.widget/1.0.0",
            "--extension",
            "html",
            "--selector",
            "mobile",
            "--list-candidates",
        ],
        "Sample Candidate Listing",
    )
    print("\nAll development checks passed successfully.")


if __name__ == "__main__":
    main()
