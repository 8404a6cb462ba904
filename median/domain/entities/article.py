"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Article:
    """Core domain entity representing a blog article.

    ``published`` is always an explicit boolean; drafts are articles with
    ``published=False``.
    """

    title: str
    body: str
    published: bool
    description: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_draft(self) -> bool:
        return not self.published

    def update(self, changes: dict[str, object]) -> None:
        """Apply the given field changes and refresh the updated_at timestamp.

        Only ``title``, ``description``, ``body`` and ``published`` are
        mutable; ``id`` and ``created_at`` never change after creation.
        """
        for name in ("title", "description", "body", "published"):
            if name in changes:
                setattr(self, name, changes[name])
        self.updated_at = datetime.now(timezone.utc)
