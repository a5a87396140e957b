"""Command-line interface."""
from lorenzorbit.main import main

if __name__ == "__main__":
    main()
