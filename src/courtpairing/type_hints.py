"""Type hints used in Court Pairing."""

from typing import Dict, List, Tuple

# Two player ids playing on the same side of the net
Team = Tuple[str, str]

# Indices into a list of teams, one circle-method matchup
TeamMatchup = Tuple[int, int]
# All matchups of one circle-method meta-round
MetaRound = List[TeamMatchup]

# Division id -> that division's own schedule
DivisionSchedules = Dict[str, List["Round"]]

#  LocalWords:  TeamMatchup MetaRound
