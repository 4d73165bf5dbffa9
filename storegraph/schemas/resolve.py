# storegraph/schemas/resolve.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ResolveIn(BaseModel):
    # camelCase on the wire to match the schema layer
    model_config = ConfigDict(populate_by_name=True)

    type_name: str = Field(..., alias="typeName")
    field_name: str = Field(..., alias="fieldName")
    parent: Optional[Any] = None
    args: Dict[str, Any] = Field(default_factory=dict)


class ResolveOut(BaseModel):
    data: Any = None


class ResolverInfo(BaseModel):
    name: str
    kind: str


class ResolversOut(BaseModel):
    count: int
    resolvers: List[ResolverInfo]
