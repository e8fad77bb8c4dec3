"""
Document shapes for the Art database.
"""

from pydantic import BaseModel, ConfigDict, Field


class Painting(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    artist: str = Field(alias="Artist")
    year: int = Field(alias="Year")
    medium: str = Field(alias="Medium")

    def to_document(self) -> dict:
        """Serialize using the stored (capitalised) field names"""
        return self.model_dump(by_alias=True)
