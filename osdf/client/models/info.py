"""Server information model."""

from pydantic import BaseModel, ConfigDict


class ServerInfo(BaseModel):
    """Administrative and technical metadata published at ``/info``."""

    api_version: str
    title: str
    description: str | None = None
    admin_contact_email1: str | None = None
    admin_contact_email2: str | None = None
    technical_contact1: str | None = None
    technical_contact2: str | None = None
    comment1: str | None = None
    comment2: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)
