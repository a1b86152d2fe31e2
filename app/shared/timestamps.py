from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator

def as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]
