import sys

from intelligent_spellchecker.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
