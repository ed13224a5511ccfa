"""
Session Records

Two records describe one session in the key-value store:
- SessionRecord under ``session:<token>`` with the configured TTL
- SessionMetadataRecord under ``session:metadata:<token>`` with twice that TTL

The metadata record outliving the session record is what lets an expired
token be told apart from one that never existed.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SessionRecord(BaseModel):
    """Primary session payload, authoritative for access"""

    email: str
    timestamp: datetime


class SessionMetadataRecord(BaseModel):
    """Self-describing bookkeeping record kept past the session TTL"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    created_at: datetime
    expires_at: datetime
    token: str
