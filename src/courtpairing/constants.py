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

# --- Constants ---
SCHEDULE_FILE_EXTENSION = ".json"

# Pairing modes
MODE_ROTATING = "rotating"
MODE_FIXED = "fixed"
DEFAULT_MODE = MODE_ROTATING
PAIRING_MODES = (MODE_ROTATING, MODE_FIXED)

# Doubles geometry
PLAYERS_PER_TEAM = 2
PLAYERS_PER_COURT = 4
MIN_PLAYERS = PLAYERS_PER_COURT

# Rotating scheduler weights
UNPARTNERED_BONUS = 100  # opponent pair that has never partnered
REPEAT_OPPONENT_PENALTY = 2  # per previous meeting with a team-1 player

# Suggested round count buffer for greedy imperfection (rotating mode)
ROUND_ESTIMATE_BUFFER = 0.3

# Roster capacity
DEFAULT_MAX_PLAYERS = 48
MAX_PLAYERS_LIMIT = 48

# Divisions
DEFAULT_DIVISION_COLOR = "#854AAF"

# Logging
LOG_DIR_ENV = "COURT_PAIRING_LOG_DIR"
LOG_LEVEL_ENV = "COURT_PAIRING_LOG_LEVEL"
LOG_FILE_NAME = "court-pairing.log"
