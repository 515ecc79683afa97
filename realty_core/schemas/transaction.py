"""Transaction record schema and its public serialization.

The record mirrors what is stored for a deal/listing. Serialization is
deliberately narrow: only id, user, name, type, status, createDate and
updateDate leave the service. Address and financial fields are stored but
never serialized.

The owning user is a tagged union:
- ExpandedUser: the user document was populated; serialized through
  UserResponse so the password hash is dropped
- UserReference: only the user id is known; serialized as the raw id
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..auth.schemas import UserResponse


class ExpandedUser(BaseModel):
    kind: Literal["expanded"] = "expanded"
    user: UserResponse


class UserReference(BaseModel):
    kind: Literal["reference"] = "reference"
    id: str


UserRef = Annotated[ExpandedUser | UserReference, Field(discriminator="kind")]


class TransactionRecord(BaseModel):
    """A real-estate transaction as stored.

    Field names are snake_case in Python and camelCase in documents and
    JSON (taxID keeps its historical spelling).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    user: UserRef | None = None
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)
    description: str | None = None

    purchase_price: float | None = None
    list_price: float | None = None

    list_date: str | None = None
    effective_date: str | None = None
    expiration_date: str | None = None
    closing_date: str | None = None
    create_date: str | None = None
    update_date: str | None = None

    comments: str | None = None
    mls_number: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    county: str | None = None
    state: str | None = None
    zip: str | None = None
    tax_id: str | None = Field(default=None, alias="taxID")
    property_type: str | None = None

    @model_validator(mode="after")
    def default_update_date(self) -> "TransactionRecord":
        # updateDate starts at creation time and is never touched afterwards
        if self.update_date is None:
            self.update_date = self.create_date
        return self

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "TransactionRecord":
        """Build a record from a stored document.

        A dict under "user" means the reference was populated; a string is
        the raw user id.
        """
        data = dict(document)
        user = data.pop("user", None)

        if isinstance(user, dict):
            data["user"] = {"kind": "expanded", "user": user}
        elif user is not None:
            data["user"] = {"kind": "reference", "id": str(user)}

        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Convert to a storable document (camelCase keys, no None values).

        The user is always stored as a reference id.
        """
        document = self.model_dump(by_alias=True, exclude_none=True, exclude={"id", "user"})
        user_id = self.user_id
        if user_id is not None:
            document["user"] = user_id
        return document

    @property
    def user_id(self) -> str | None:
        if self.user is None:
            return None
        if self.user.kind == "expanded":
            return self.user.user.id
        return self.user.id

    def serialize(self) -> dict[str, Any]:
        """Public representation of the record."""
        if self.user is None:
            user = None
        elif self.user.kind == "expanded":
            user = self.user.user.model_dump()
        else:
            user = self.user.id

        return {
            "id": self.id,
            "user": user,
            "name": self.name,
            "type": self.type,
            "status": self.status,
            "createDate": self.create_date,
            "updateDate": self.update_date,
        }
