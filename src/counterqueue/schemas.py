"""API schemas for counterqueue."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TicketIssueRequest(BaseModel):
    service: str = Field(..., min_length=1, max_length=64)


class TicketView(BaseModel):
    id: int
    label: str
    service: str


class CallRecordView(BaseModel):
    label: str
    service: str
    called_at: datetime


class ServiceCategoryView(BaseModel):
    category: str
    prefix: str


class BoardView(BaseModel):
    waiting_count: int
    current_ticket: Optional[TicketView] = None
    recent_calls: list[CallRecordView] = Field(default_factory=list)
    waiting: list[str] = Field(default_factory=list)


class OperatorActionResponse(BaseModel):
    processed: bool
    ticket: Optional[TicketView] = None
    message: Optional[str] = None
    board: BoardView
