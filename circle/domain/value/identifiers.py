"""Strongly typed identifiers for Circle domain entities.

Using NewType keeps comment, user and group ids from being mixed up.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
GroupId = NewType("GroupId", UUID)
