from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class Action(BaseModel):
    name: str = "beer"
    text: str = "Select"
    type: str = "button"
    value: str


class Attachment(BaseModel):
    title: Optional[str] = None
    text: Optional[str] = None
    image_url: Optional[str] = None
    fallback: Optional[str] = None
    callback_id: Optional[str] = None
    actions: Optional[List[Action]] = None


class Message(BaseModel):
    response_type: str = "in_channel"
    attachments: List[Attachment] = []
    
    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class PayloadAction(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    name: Optional[str] = None
    type: Optional[str] = None
    value: str


class ActionPayload(BaseModel):
    """Interactive message callback sent by Slack when a button is pressed."""
    
    model_config = ConfigDict(extra="ignore")
    
    callback_id: str
    actions: List[PayloadAction] = []
