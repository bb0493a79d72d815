"""
Space Game: a small vertical arcade shooter built on pygame.
"""
