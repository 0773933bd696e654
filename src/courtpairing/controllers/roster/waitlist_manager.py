"""Waitlist management for capped rosters.

Signups past capacity queue on a waitlist. Waitlisted players hold
positions ``1..k`` in arrival order, and every operation here leaves the
positions in that shape. When an active player drops out, the head of the
queue is promoted.

Operations work on caller-owned ``RosterPlayer`` records and update them in
place. Persisting the changes, as one transaction per roster, is up to
the caller.
"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Optional

from courtpairing.constants import DEFAULT_MAX_PLAYERS, MAX_PLAYERS_LIMIT
from courtpairing.exceptions import (
    DuplicatePlayerException,
    EmptyWaitlistException,
    InvalidConfigurationException,
    PlayerNotFoundException,
    PlayerNotOnWaitlistException,
)
from courtpairing.models.roster import RosterPlayer
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Admission:
    """Outcome of a signup: active, or queued at ``waitlist_position``."""

    active: bool
    waitlist_position: Optional[int] = None


def waitlisted(players: Iterable[RosterPlayer]) -> List[RosterPlayer]:
    """Waitlisted players in queue order."""
    return sorted(
        (p for p in players if p.is_waitlisted), key=lambda p: p.waitlist_position
    )


def active_player_count(players: Iterable[RosterPlayer]) -> int:
    return sum(1 for p in players if p.is_active)


def next_waitlist_position(players: Iterable[RosterPlayer]) -> int:
    """One past the highest waitlist position, 1 for an empty queue."""
    positions = [p.waitlist_position for p in players if p.is_waitlisted]
    return max(positions) + 1 if positions else 1


def is_contiguous(players: Iterable[RosterPlayer]) -> bool:
    """True when waitlist positions are exactly ``1..k``."""
    positions = sorted(p.waitlist_position for p in players if p.is_waitlisted)
    return positions == list(range(1, len(positions) + 1))


def _close_gap(players: Iterable[RosterPlayer], removed_position: int) -> None:
    for player in players:
        if player.is_waitlisted and player.waitlist_position > removed_position:
            player.waitlist_position -= 1


def _find(players: Iterable[RosterPlayer], player_id: str) -> RosterPlayer:
    for player in players:
        if player.id == player_id:
            return player
    raise PlayerNotFoundException(f"No player with id {player_id!r}")


class WaitlistManager:
    """Admits signups and keeps the waitlist in order.

    This class is responsible for:
    - Deciding whether a signup is active or waitlisted
    - Promoting the head of the queue when an active spot frees up
    - Host approvals, which grow capacity instead of waiting for a spot
    - Renumbering the queue after every change
    """

    def __init__(self, capacity: int = DEFAULT_MAX_PLAYERS):
        """Initialize the manager.

        Args:
            capacity: Active roster size before signups are waitlisted
        """
        if not 1 <= capacity <= MAX_PLAYERS_LIMIT:
            raise InvalidConfigurationException(
                f"Capacity must be between 1 and {MAX_PLAYERS_LIMIT}, got {capacity}"
            )
        self.capacity = capacity

    def admit(self, players: Iterable[RosterPlayer]) -> Admission:
        """Decide where the next signup goes.

        Args:
            players: Current roster, waitlisted players included

        Returns:
            Admission, active while the roster is under capacity
        """
        players = list(players)
        if active_player_count(players) < self.capacity:
            return Admission(active=True)
        return Admission(active=False, waitlist_position=next_waitlist_position(players))

    def add_player(
        self, players: MutableSequence[RosterPlayer], player: RosterPlayer
    ) -> Admission:
        """Admit ``player`` and append it to the roster.

        Raises:
            DuplicatePlayerException: If the id is already on the roster
        """
        if any(p.id == player.id for p in players):
            raise DuplicatePlayerException(f"Player {player.id!r} already signed up")

        admission = self.admit(players)
        player.is_playing = True
        player.waitlist_position = admission.waitlist_position
        player.order_num = len(players)
        players.append(player)
        if admission.active:
            logger.info(f"Player {player.id} admitted to the roster")
        else:
            logger.info(
                f"Player {player.id} waitlisted at position {admission.waitlist_position}"
            )
        return admission

    def promote_next(self, players: Iterable[RosterPlayer]) -> Optional[RosterPlayer]:
        """Move the head of the waitlist onto the roster.

        Returns:
            The promoted player, or None when nobody is waiting
        """
        players = list(players)
        queue = waitlisted(players)
        if not queue:
            return None

        head = queue[0]
        position = head.waitlist_position
        head.waitlist_position = None
        head.is_playing = True
        _close_gap(players, position)
        logger.info(f"Promoted player {head.id} from the waitlist")
        return head

    def deactivate(
        self, players: Iterable[RosterPlayer], player_id: str
    ) -> Optional[RosterPlayer]:
        """Mark a player as not playing.

        Only an active player frees a spot; a waitlisted player keeps
        their place in the queue.

        Returns:
            The player promoted into the freed spot, if any
        """
        players = list(players)
        player = _find(players, player_id)
        was_active = player.is_active
        player.is_playing = False
        if was_active:
            return self.promote_next(players)
        return None

    def remove_player(
        self, players: MutableSequence[RosterPlayer], player_id: str
    ) -> Optional[RosterPlayer]:
        """Delete a player from the roster.

        Removing an active player promotes the head of the queue. Removing
        a waitlisted player only closes the gap it leaves.

        Returns:
            The promoted player, if any
        """
        player = _find(players, player_id)
        players.remove(player)

        if player.is_waitlisted:
            _close_gap(players, player.waitlist_position)
            logger.info(f"Removed waitlisted player {player_id}")
            return None
        logger.info(f"Removed player {player_id}")
        if player.is_playing:
            return self.promote_next(players)
        return None

    def approve(
        self, players: Iterable[RosterPlayer], player_id: str
    ) -> RosterPlayer:
        """Let a specific waitlisted player in, making room for them.

        Raises:
            PlayerNotFoundException: If the id is unknown
            PlayerNotOnWaitlistException: If the player is not waitlisted
        """
        players = list(players)
        player = _find(players, player_id)
        if not player.is_waitlisted:
            raise PlayerNotOnWaitlistException(
                f"Player {player_id!r} is not on the waitlist"
            )

        position = player.waitlist_position
        self.capacity = min(MAX_PLAYERS_LIMIT, self.capacity + 1)
        player.waitlist_position = None
        player.is_playing = True
        _close_gap(players, position)
        logger.info(f"Approved waitlisted player {player_id}")
        return player

    def approve_all(self, players: Iterable[RosterPlayer]) -> List[RosterPlayer]:
        """Let everyone on the waitlist in.

        Raises:
            EmptyWaitlistException: If nobody is waiting
        """
        queue = waitlisted(players)
        if not queue:
            raise EmptyWaitlistException("No players on waitlist")

        self.capacity = min(MAX_PLAYERS_LIMIT, self.capacity + len(queue))
        for player in queue:
            player.waitlist_position = None
            player.is_playing = True
        logger.info(f"Approved all {len(queue)} waitlisted players")
        return queue
