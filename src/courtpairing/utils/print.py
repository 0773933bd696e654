"""Plain-text rendering of schedules for the terminal."""

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

from typing import Dict, List, Optional, Sequence

from courtpairing.models.schedule import Round


def _name(player_id: str, names: Optional[Dict[str, str]]) -> str:
    if names:
        return names.get(player_id, player_id)
    return player_id


def format_round(round_data: Round, names: Optional[Dict[str, str]] = None) -> str:
    """Render one round, one court per line."""
    lines = [f"Round {round_data.round_number}"]
    for match in round_data.matches:
        team1 = " & ".join(_name(pid, names) for pid in match.team1)
        team2 = " & ".join(_name(pid, names) for pid in match.team2)
        lines.append(f"  Court {match.court}: {team1}  vs  {team2}")
    if round_data.sitting:
        sitting = ", ".join(_name(pid, names) for pid in round_data.sitting)
        lines.append(f"  Sitting: {sitting}")
    return "\n".join(lines)


def format_schedule(
    rounds: Sequence[Round], names: Optional[Dict[str, str]] = None
) -> str:
    """Render a whole schedule, rounds separated by blank lines."""
    if not rounds:
        return "No rounds scheduled"
    blocks: List[str] = [format_round(r, names) for r in rounds]
    return "\n\n".join(blocks)
