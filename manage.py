"""
This is the main file to run the game.
It imports the game class from the space_game package and runs it.
"""

from space_game.app import SpaceGame

if __name__ == "__main__":
    game = SpaceGame()
    game.run()
