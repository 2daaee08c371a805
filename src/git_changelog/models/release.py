"""Pending release header model."""

from pydantic import BaseModel


class PendingRelease(BaseModel):
    """Header for commits newer than the latest tag."""

    label: str
    date: str

    def render(self) -> str:
        """Render the markdown header block."""
        return f"\n## {self.label} ({self.date})\n\n"
