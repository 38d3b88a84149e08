"""Type hints used in Bounceball Pairing."""

from typing import Dict, FrozenSet, List, Sequence, Tuple

# One team, in slot order
Team = List["Player"]
# All teams of one round. Teams 2i and 2i+1 play each other in round one.
Teams = List[Team]
# Read-only view accepted by validators and scorers
TeamsView = Sequence[Sequence["Player"]]
# Unordered pair of player ids
PairKey = FrozenSet[int]
# Tuple of team indices in Teams
MatchPairing = Tuple[int, int]
# All pairings for one round
RoundSchedule = List[MatchPairing]
# Player id -> rating change
RatingDeltas = Dict[int, float]

#  LocalWords:  MatchPairing RoundSchedule
