"""Path parameter types shared by the v1 routers."""

from typing import Annotated

from fastapi import Path

from app.schemas.common import MAX_RECORD_ID

# Out-of-range ids fail request validation (400) instead of reaching the database.
RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]
