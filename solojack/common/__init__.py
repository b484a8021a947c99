"""Card, deck and IO primitives shared by the game modules."""
