"""
ApiKey Entity

Opaque access keys that identify calling clients.
"""

from datetime import UTC, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel


class ApiKey(SQLModel, table=True):
    """
    ApiKey entity - bearer credential for a calling client.

    Business Rules:
    - api_key is 64 lowercase hex chars (32 random bytes), unique
    - Deactivated by clearing is_active, never deleted
    - last_used_at is refreshed on every successful validation
    - permissions are reserved labels, not evaluated yet
    """

    __tablename__ = "api_keys"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    api_key: str = Field(unique=True, index=True, max_length=64)
    client_name: str = Field(max_length=255)
    is_active: bool = Field(default=True)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    last_used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
