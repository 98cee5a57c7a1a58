# ABOUTME: Lookup commands sharing the dataset facade with the species search.
# ABOUTME: Contains the learnset formatter and the weakness/effectiveness matchups.

from dexsearch.lookups.learn import learn
from dexsearch.lookups.matchup import effectiveness, weakness

__all__ = ["effectiveness", "learn", "weakness"]
