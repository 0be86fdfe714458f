# app/api/api_v1/params.py
from typing import Annotated

from fastapi import Path, Query

from app.models.base import MAX_INTEGER

# Ids fuera de rango → 422 antes de llegar a la BD
RowId = Annotated[int, Path(ge=1, le=MAX_INTEGER)]

Skip = Annotated[int, Query(ge=0, le=MAX_INTEGER)]
Limit = Annotated[int, Query(ge=0, le=MAX_INTEGER)]
