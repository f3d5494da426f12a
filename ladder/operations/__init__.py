"""
Operations Layer

Pure rating computations over the game log. Operations never touch storage;
the caller hands in the games and renders the results.

- RatingEngine: final ratings and rating trajectories
"""
