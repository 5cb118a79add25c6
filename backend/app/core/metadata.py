"""
Site-wide document metadata shown in the <head> of every page
"""
from pydantic import BaseModel, ConfigDict, Field


class SiteMetadata(BaseModel):
    """Title and description for the document head"""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Document title")
    description: str = Field(..., min_length=1, description="Meta description")


metadata = SiteMetadata(
    title="IPL Auction",
    description="Build your dream IPL team through live auctions",
)


def get_metadata() -> SiteMetadata:
    """Return the application-wide metadata record"""
    return metadata
