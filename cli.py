"""Script entry point: ``python cli.py [--debug] [--bind HOST] [--port PORT]``

Runs the main CLI from the cli package.
"""

from cli.main import main

if __name__ == "__main__":
    main()
