"""
Duck Shoot - click the ducks before they fly off to their next spot.

Run with:
    duckshoot --mode classic
"""
