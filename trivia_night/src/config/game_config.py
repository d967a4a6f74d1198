# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Game Rules Configuration.

Constants shared by the roster and question services.
"""

# Team names are trimmed before this limit is checked
MAX_TEAM_NAME_LENGTH = 30

DEFAULT_QUESTION_TYPE = "text"

MIN_SCORE = 0
