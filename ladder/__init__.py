"""
Pool ladder rating core.

Turns a log of pool games into Elo ratings, rating trajectories and a
partitioned leaderboard.
"""
