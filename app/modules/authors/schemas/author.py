from pydantic import BaseModel, ConfigDict, Field

class Author(BaseModel):
    """Author embedded in every post response"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str = Field("", alias="ID")
    name: str = Field("", alias="Name")
    avatar_url: str = Field("", alias="AvatarURL")
