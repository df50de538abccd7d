"""
Config schemas - Pydantic models for configuration requests/responses

The configuration document itself is returned as a plain dict (camelCase keys in
record declaration order); these models cover the smaller request bodies.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ReorderRequest(BaseModel):
    """Completed drag gesture: block dropped onto another block"""
    model_config = ConfigDict(populate_by_name=True)

    source_id: str = Field(alias="sourceId", description="Dragged block (email, sms, social, passkey, external)")
    target_id: Optional[str] = Field(None, alias="targetId", description="Block under the pointer at drop time (null: dropped outside)")


class ReorderResponse(BaseModel):
    """Resulting order"""
    model_config = ConfigDict(populate_by_name=True)

    changed: bool = Field(description="False for identity moves, unknown or hidden blocks")
    component_order: List[str] = Field(alias="componentOrder")


class BlocksResponse(BaseModel):
    """Blocks currently shown in the preview (order filtered by enable flags)"""
    blocks: List[str]
    count: int
