"""Allow running the application with ``python -m ridefare``."""

from ridefare.cli_module.cli import main

if __name__ == '__main__':
    main()
