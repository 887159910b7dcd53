from app.schemas.response import APIModel


class CategoryOut(APIModel):
    id: int
    name: str
