from pydantic import BaseModel


class OrmModel(BaseModel):
    """Read-only model that can be built straight from an ORM row."""

    class Config:
        from_attributes = True
        frozen = True
