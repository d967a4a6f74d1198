# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Application services.

- DisplayCoordinatorApplicationService: views and display-only host actions
- RosterApplicationService: teams, answers, scores
- QuestionLifecycleApplicationService: questions and game reset
"""

from trivia_night.src.application.services.display_coordinator_application_service import (
    DisplayCoordinatorApplicationService,
)
from trivia_night.src.application.services.roster_application_service import (
    RosterApplicationService,
)
from trivia_night.src.application.services.question_lifecycle_application_service import (
    QuestionLifecycleApplicationService,
)

__all__ = [
    "DisplayCoordinatorApplicationService",
    "RosterApplicationService",
    "QuestionLifecycleApplicationService",
]
