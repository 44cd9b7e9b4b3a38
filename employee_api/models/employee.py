"""
Employee models.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class Employee(BaseModel):
    """Employee record."""

    id: Optional[str] = Field(None, description="Assigned by the store on creation")
    name: Optional[str] = None
    designation: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = Field(None, allow_inf_nan=False)

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Asha",
                "designation": "Engineer",
                "department": "R&D",
                "salary": 95000
            }
        }
    )

    def to_document(self) -> dict:
        """Document to store, without the id."""
        return self.model_dump(exclude={"id"})
