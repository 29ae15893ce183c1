"""Journal schema."""

from pydantic import BaseModel


class Journal(BaseModel):
    """A peer-reviewed journal in the catalogue.

    Attributes:
        id: Unique journal identifier
        title: Display title
        description: Scope statement shown in the directory
        issn: ISSN as printed; display only, not validated
        field: Academic field used by the directory filter
        publisher: Publishing house
        cover_image: Cover image reference
        contact_email: Editorial contact address
    """

    id: str
    title: str
    description: str
    issn: str
    field: str
    publisher: str
    cover_image: str = ""
    contact_email: str = ""

    model_config = {"frozen": True}
