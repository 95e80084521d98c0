"""Type hints used in Santa Pairing."""

from typing import Collection, Dict, List, Mapping, Sequence, Set, Tuple

# A participant is identified by their name
Participant = str
# Ordered participants, as read from the names file (or shuffled)
Participants = Sequence[Participant]
# (giver, recipient)
Pair = Tuple[Participant, Participant]
# All pairs of one run, in giver order
Pairs = List[Pair]
# A household or similar set of people who must not draw each other
Group = Collection[Participant]
Groups = Collection[Group]
# giver -> everyone they gave to before
HistoryMapping = Mapping[Participant, Collection[Participant]]
RecipientSets = Dict[Participant, Set[Participant]]

#  LocalWords:  HistoryMapping RecipientSets
