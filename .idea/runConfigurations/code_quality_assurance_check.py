import subprocess
import sys

SOURCES = ["ramsey_sensing", "tests"]
CHECKS = [
    ("isort", ["isort", "--check-only", *SOURCES]),
    ("black", ["black", "--check", *SOURCES]),
    ("pytest", ["pytest", "tests"]),
    ("mypy", ["mypy", *SOURCES]),
    ("pylint", ["pylint", *SOURCES]),
]

failed = []
for name, command in CHECKS:
    print(f"Running {name}...")
    if subprocess.run(["uv", "run", *command], check=False).returncode != 0:
        failed.append(name)
    print("---------------\n\n")

if failed:
    print(f"Failed checks: {', '.join(failed)}")
    sys.exit(1)
