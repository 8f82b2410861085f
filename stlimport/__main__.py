"""Run the stlimport CLI with ``python -m stlimport``."""

from stlimport.cli.app import main

if __name__ == "__main__":
    main()
