"""Allow ``python -m item_store``."""

from item_store.bootstrap import main

if __name__ == "__main__":
    main()
