"""
Allow running the package with: python -m dupremover

Examples:
    python -m dupremover ~/Pictures /media/backup --dry-run
    python -m dupremover config            # Show configuration
    python -m dupremover config --init     # Create example config file
"""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        from .user_config import SETTINGS, get_user_config

        config = get_user_config()

        if '--init' in sys.argv or '-i' in sys.argv:
            if config.create_example_config():
                print("Created example configuration file at:")
                print(f"  {config.config_file_path}")
            else:
                print("Failed to create configuration file.")
                sys.exit(1)
        else:
            print(f"Configuration file: {config.config_file_path}")
            if config.config_file_path.exists():
                print("Status: found")
            else:
                print("Status: not found (using defaults)")
                print("\nRun 'python -m dupremover config --init' to create one.")

            print("\nCurrent settings:")
            for name in SETTINGS:
                value, source = config.lookup(name)
                print(f"  {name}: {value!r} ({source})")
        return

    from .cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
