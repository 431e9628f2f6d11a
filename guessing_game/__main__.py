import sys

from guessing_game.play import main

if __name__ == "__main__":
    sys.exit(main())
