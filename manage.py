"""
This is the main file to run the game.
It imports the run function from the space_invaders app and runs it.
"""

import sys

from space_invaders.app import run

if __name__ == "__main__":
    sys.exit(run())
