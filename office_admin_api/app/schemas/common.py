"""
Shared schema building blocks.

``ApiModel`` is the base class for every payload: fields are declared in
snake_case and exposed to the dashboard in camelCase (``clientType``,
``basePrice``).  Either spelling is accepted on input.  Enumerations
hold the closed vocabularies used by the entities; values are stored as
plain strings.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
    }


class PatchModel(ApiModel):
    """Base for partial updates.

    Every field of an update schema is optional, but fields listed in
    ``required_fields`` may not be explicitly set to ``null``: omitting
    a field keeps the stored value, nulling a mandatory one is a
    validation error.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self, exclude: Tuple[str, ...] = ()) -> Dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True, exclude=set(exclude))


class ClientType(str, Enum):
    PRIVATE = "Private"
    COMPANY = "Company"


class ServiceFrequency(str, Enum):
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"
    ON_DEMAND = "On-Demand"


class ProjectStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class ContactMethod(str, Enum):
    PHONE = "Phone"
    EMAIL = "Email"
    IN_PERSON = "In-person"


class ResponseType(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NO_RESPONSE = "No Response"


class FollowUpStatus(str, Enum):
    PENDING = "Pending"
    DONE = "Done"
    CANCELED = "Canceled"


class EmployeeRole(str, Enum):
    MANAGER = "Manager"
    SALES = "Sales"
    CUSTOMER_SERVICE = "Customer Service"
    TECHNICIAN = "Technician"
