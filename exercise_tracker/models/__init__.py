"""ORM Models: one file per record kind.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - No relationship() between users and exercises: exercises reference users
      by value (user_id text), checked by the handler before insert
"""

from exercise_tracker.models.user import User  # noqa: F401
from exercise_tracker.models.exercise import Exercise  # noqa: F401
