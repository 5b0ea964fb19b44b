"""Allow ``python -m label_inspector``."""

from label_inspector.main import main

if __name__ == "__main__":
    main()
