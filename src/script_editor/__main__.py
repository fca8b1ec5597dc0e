import sys

from script_editor.cli import main

if __name__ == "__main__":  # pragma: no cover - exercised through the CLI
    sys.exit(main())
