"""Issue schema."""

from pydantic import BaseModel, Field


class Issue(BaseModel):
    """A numbered issue of a journal volume.

    Attributes:
        id: Unique issue identifier
        volume: Volume number (positive)
        number: Issue number within the volume (positive)
        year: Publication year
        cover_image: Optional cover image reference
        journal_id: Owning journal identifier
    """

    id: str
    volume: int = Field(ge=1)
    number: int = Field(ge=1)
    year: int
    cover_image: str | None = None
    journal_id: str

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"Vol. {self.volume}, Issue {self.number}"
